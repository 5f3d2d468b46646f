import pytest

from imgkit_core.utils import to_positive_integer_array, to_sha256_fingerprint


@pytest.mark.bench
def test_fingerprint_throughput(benchmark):
    text = "/images/cat.jpg?width=200&height=150&quality=90" * 50
    benchmark(lambda: to_sha256_fingerprint(text))


@pytest.mark.bench
def test_extraction_throughput(benchmark):
    text = " ".join(f"crop={i},{i + 1}" for i in range(500))
    benchmark(lambda: to_positive_integer_array(text))
