import pytest

from imgkit_core import InvalidArgument, PathPlatform
from imgkit_core.config import AppConfig, PathsConfig, set_config
from imgkit_core.utils import validation
from imgkit_core.utils.validation import (
    POSIX_INVALID_FILE_NAME_CHARS,
    WINDOWS_INVALID_FILE_NAME_CHARS,
    invalid_file_name_chars,
    is_valid_path_name,
    is_valid_virtual_path_name,
)

WEB_CHARS = '<>:"|?*'


def test_virtual_path_accepted_with_prefix() -> None:
    assert is_valid_virtual_path_name("~/images/foo.png", invalid_chars=WEB_CHARS)


@pytest.mark.parametrize("value", ["images/foo.png", "/images/foo.png", "~images/foo.png", "", "~"])
def test_virtual_path_requires_prefix(value: str) -> None:
    assert not is_valid_virtual_path_name(value, invalid_chars=WEB_CHARS)


def test_virtual_path_remainder_is_checked() -> None:
    assert not is_valid_virtual_path_name("~/images/foo?.png", invalid_chars=WEB_CHARS)
    assert is_valid_virtual_path_name("~/", invalid_chars=WEB_CHARS)


def test_windows_rules() -> None:
    chars = invalid_file_name_chars(PathPlatform.WINDOWS)
    assert not is_valid_path_name("foo:bar", invalid_chars=chars)
    assert not is_valid_path_name("tab\there", invalid_chars=chars)
    assert is_valid_path_name("foo_bar", invalid_chars=chars)


def test_posix_rules() -> None:
    chars = invalid_file_name_chars("posix")
    assert is_valid_path_name("foo:bar", invalid_chars=chars)
    assert not is_valid_path_name("foo/bar", invalid_chars=chars)
    assert not is_valid_path_name("nul\x00byte", invalid_chars=chars)


def test_builtin_sets_forbid_separator() -> None:
    assert "/" in WINDOWS_INVALID_FILE_NAME_CHARS
    assert "/" in POSIX_INVALID_FILE_NAME_CHARS
    assert not is_valid_virtual_path_name("~/images/foo.png", invalid_chars=POSIX_INVALID_FILE_NAME_CHARS)


def test_auto_follows_running_platform(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(validation.sys, "platform", "win32")
    assert invalid_file_name_chars() == WINDOWS_INVALID_FILE_NAME_CHARS
    monkeypatch.setattr(validation.sys, "platform", "linux")
    assert invalid_file_name_chars() == POSIX_INVALID_FILE_NAME_CHARS


def test_unknown_platform_rejected() -> None:
    with pytest.raises(InvalidArgument):
        invalid_file_name_chars("amiga")


def test_config_platform_used_by_default() -> None:
    set_config(AppConfig(paths=PathsConfig(platform=PathPlatform.WINDOWS)))
    assert not is_valid_path_name("foo:bar")
    set_config(AppConfig(paths=PathsConfig(platform=PathPlatform.POSIX)))
    assert is_valid_path_name("foo:bar")


def test_config_override_beats_platform() -> None:
    set_config(AppConfig(paths=PathsConfig(platform=PathPlatform.WINDOWS, invalid_chars="#")))
    assert is_valid_path_name("foo:bar")
    assert not is_valid_path_name("foo#bar")
    assert is_valid_virtual_path_name("~/images/foo.png")


def test_regex_metacharacters_are_literal() -> None:
    assert not is_valid_path_name("a]b", invalid_chars="]^-\\")
    assert is_valid_path_name("abc", invalid_chars="]^-\\")


def test_empty_invalid_set_accepts_everything() -> None:
    assert is_valid_path_name("any:thing/at*all", invalid_chars="")


def test_none_input_rejected() -> None:
    with pytest.raises(InvalidArgument):
        is_valid_path_name(None)
    with pytest.raises(InvalidArgument):
        is_valid_virtual_path_name(None)
