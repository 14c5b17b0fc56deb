from pathlib import Path

import pytest

from coercion.config import runtime
from coercion.config.errors import ConfigurationError
from coercion.config.runtime import env_bool, env_int, env_str

_CONST_42 = 42


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("TEST_COERCION_INT", "42")
    monkeypatch.setenv("TEST_COERCION_BOOL", "Yes")
    monkeypatch.setenv("TEST_COERCION_STR", "  padded  ")

    assert env_int("TEST_COERCION_INT") == _CONST_42
    assert env_bool("TEST_COERCION_BOOL") is True
    assert env_str("TEST_COERCION_STR") == "padded"
    assert env_str("TEST_COERCION_STR", strip=False) == "  padded  "


def test_env_helpers_defaults(monkeypatch):
    monkeypatch.delenv("TEST_COERCION_MISSING", raising=False)
    assert env_str("TEST_COERCION_MISSING", "fallback") == "fallback"
    assert env_int("TEST_COERCION_MISSING", 7) == 7
    assert env_bool("TEST_COERCION_MISSING", False) is False


def test_env_helpers_errors(monkeypatch):
    monkeypatch.delenv("TEST_COERCION_MISSING", raising=False)
    with pytest.raises(ConfigurationError, match="is missing or empty"):
        env_str("TEST_COERCION_MISSING", required=True)

    monkeypatch.setenv("TEST_COERCION_BAD_INT", "seven")
    with pytest.raises(ConfigurationError, match="must be an integer"):
        env_int("TEST_COERCION_BAD_INT")

    monkeypatch.setenv("TEST_COERCION_BAD_BOOL", "maybe")
    with pytest.raises(ConfigurationError, match="must be a boolean"):
        env_bool("TEST_COERCION_BAD_BOOL")


def test_dotenv_values_fill_missing_variables(monkeypatch, tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.write_text("# comment\nTEST_COERCION_FROM_FILE='from-file'\nexport TEST_COERCION_EXPORTED=1\nnot a pair\n")
    monkeypatch.delenv("TEST_COERCION_FROM_FILE", raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (env_file,))
    runtime.clear_default_values()

    assert env_str("TEST_COERCION_FROM_FILE") == "from-file"
    assert env_bool("TEST_COERCION_EXPORTED") is True

    monkeypatch.setenv("TEST_COERCION_FROM_FILE", "from-env")
    assert env_str("TEST_COERCION_FROM_FILE") == "from-env"
    runtime.clear_default_values()


def test_env_bool_accepts_parse_bool_words(monkeypatch):
    for raw, expected in (("on", True), ("OFF", False), ("1", True), ("no", False)):
        monkeypatch.setenv("TEST_COERCION_FLAG", raw)
        assert env_bool("TEST_COERCION_FLAG") is expected

    monkeypatch.setenv("TEST_COERCION_FLAG", "y")
    with pytest.raises(ConfigurationError, match="must be a boolean"):
        env_bool("TEST_COERCION_FLAG")


def test_read_dotenv_parses_assignments(tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "A=1\n"
        "  export B = \"two words\"\n"
        "C='it's'\n"
        "D=\n"
        "# E=5\n"
        "9F=6\n"
        "G=a=b\n"
    )
    assert runtime._read_dotenv(env_file) == {"A": "1", "B": "two words", "C": "it's", "D": "", "G": "a=b"}


def test_read_dotenv_missing_file(tmp_path: Path):
    assert runtime._read_dotenv(tmp_path / "absent.env") == {}


def test_read_dotenv_read_failure(tmp_path: Path):
    directory = tmp_path / "dir.env"
    directory.mkdir()
    with pytest.raises(ConfigurationError, match="Failed to load configuration"):
        runtime._read_dotenv(directory)
