"""Integer extraction from free-form text."""
from __future__ import annotations

from typing import Iterator, List

import regex

from ..config import get_config
from ..exceptions import IntegerOverflow, InvalidArgument, PreconditionViolation, require_text

DIGIT_RUN_PATTERN = regex.compile(r"[0-9]+")


def iter_positive_integers(expression: str, *, max_value: int | None = None) -> Iterator[int]:
    """Yield every run of ASCII digits in ``expression`` as an ``int``, left to right.

    Signs are not part of a run, so ``"-5"`` yields ``5``. ``max_value`` defaults to
    ``numbers.max_value`` from the active configuration; a run above it raises
    :class:`IntegerOverflow`.
    """

    text = require_text(expression)
    if not text.strip():
        raise PreconditionViolation("expression must contain at least one non-whitespace character")
    limit = get_config().numbers.max_value if max_value is None else max_value
    if limit < 0:
        raise InvalidArgument(f"max_value must be non-negative, got {limit}")
    return _scan(text, limit)


def _scan(text: str, limit: int) -> Iterator[int]:
    for match in DIGIT_RUN_PATTERN.finditer(text):
        run = match.group()
        # compare lengths first so huge runs are rejected without int conversion
        if len(run.lstrip("0")) > len(str(limit)):
            raise IntegerOverflow(f"Value '{run}' at offset {match.start()} exceeds {limit}")
        value = int(run)
        if value > limit:
            raise IntegerOverflow(f"Value '{run}' at offset {match.start()} exceeds {limit}")
        yield value


def to_positive_integer_array(expression: str, *, max_value: int | None = None) -> List[int]:
    """Return all digit runs of ``expression`` as integers in order of appearance.

    >>> to_positive_integer_array("abc 12 def 345")
    [12, 345]

    Raises
    ------
    PreconditionViolation
        If ``expression`` is empty or only whitespace.
    IntegerOverflow
        If a run is larger than ``max_value``.
    """

    return list(iter_positive_integers(expression, max_value=max_value))


__all__ = ["DIGIT_RUN_PATTERN", "iter_positive_integers", "to_positive_integer_array"]
