"""Unit tests for configuration and constants."""

from __future__ import annotations

from pathlib import Path

import pytest

from apsim_outputs.config import ConfigLoader, LoaderConfig
from apsim_outputs.constants import Columns, Defaults, Markers, MissingValues
from apsim_outputs.domain.entities.policies import DuplicateConstantPolicy, ErrorPolicy

ENV_VARS = (
    "APSIM_FILTER",
    "APSIM_ENCODING",
    "APSIM_FILE_LIMIT",
    "APSIM_FILL",
    "APSIM_ADD_CONSTANTS",
    "APSIM_SKIP_EMPTY",
    "APSIM_ERROR_POLICY",
    "APSIM_DUPLICATE_CONSTANTS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a stray apsim_outputs.toml in the working directory out of the tests.
    monkeypatch.chdir(tmp_path)


class TestLoaderConfig:
    """Test suite for LoaderConfig class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = LoaderConfig()

        assert config.file_filter == r"\.out"
        assert config.encoding == "utf-8"
        assert config.file_limit == 0
        assert config.fill is False
        assert config.add_constants is True
        assert config.skip_empty_files is False
        assert config.error_policy is ErrorPolicy.ABORT
        assert config.duplicate_constants is DuplicateConstantPolicy.LAST_WINS
        assert config.coerce_all_missing is True

    def test_config_is_immutable(self):
        """Test that config is frozen and cannot be modified."""
        config = LoaderConfig()

        with pytest.raises(Exception):  # FrozenInstanceError
            config.fill = True  # type: ignore[misc]

    def test_negative_file_limit_is_rejected(self):
        with pytest.raises(ValueError, match="file_limit"):
            LoaderConfig(file_limit=-1)

    def test_empty_encoding_is_rejected(self):
        with pytest.raises(ValueError, match="encoding"):
            LoaderConfig(encoding="")

    def test_invalid_filter_is_rejected(self):
        with pytest.raises(ValueError, match="regular expression"):
            LoaderConfig(file_filter="(")

    def test_plain_string_policy_is_rejected(self):
        with pytest.raises(ValueError, match="ErrorPolicy"):
            LoaderConfig(error_policy="skip")  # type: ignore[arg-type]

    def test_from_env(self, monkeypatch):
        """Environment variables override the defaults."""
        monkeypatch.setenv("APSIM_FILTER", r"\.txt")
        monkeypatch.setenv("APSIM_FILE_LIMIT", "5")
        monkeypatch.setenv("APSIM_FILL", "yes")
        monkeypatch.setenv("APSIM_ADD_CONSTANTS", "0")
        monkeypatch.setenv("APSIM_SKIP_EMPTY", "true")
        monkeypatch.setenv("APSIM_ERROR_POLICY", " SKIP ")
        monkeypatch.setenv("APSIM_DUPLICATE_CONSTANTS", "error")

        config = LoaderConfig.from_env()

        assert config.file_filter == r"\.txt"
        assert config.file_limit == 5
        assert config.fill is True
        assert config.add_constants is False
        assert config.skip_empty_files is True
        assert config.error_policy is ErrorPolicy.SKIP
        assert config.duplicate_constants is DuplicateConstantPolicy.ERROR

    def test_from_env_rejects_bad_boolean(self, monkeypatch):
        monkeypatch.setenv("APSIM_FILL", "maybe")

        with pytest.raises(ValueError, match="APSIM_FILL must be a boolean"):
            LoaderConfig.from_env()


class TestConfigLoader:
    """Test suite for ConfigLoader class."""

    def test_load_without_file_uses_defaults(self):
        assert ConfigLoader.load() == LoaderConfig()

    def test_load_from_toml(self, tmp_path):
        config_file = tmp_path / "custom.toml"
        config_file.write_text(
            "[load]\n"
            'filter = "Daily\\\\.out"\n'
            "file_limit = 3\n"
            "fill = true\n"
            "skip_empty_files = true\n"
            'error_policy = "skip"\n'
            "\n"
            "[parse]\n"
            'encoding = "latin-1"\n'
            "add_constants = false\n"
            'duplicate_constants = "error"\n'
            "coerce_all_missing = false\n",
            encoding="utf-8",
        )

        config = ConfigLoader.load(config_file)

        assert config.file_filter == r"Daily\.out"
        assert config.file_limit == 3
        assert config.fill is True
        assert config.skip_empty_files is True
        assert config.error_policy is ErrorPolicy.SKIP
        assert config.encoding == "latin-1"
        assert config.add_constants is False
        assert config.duplicate_constants is DuplicateConstantPolicy.ERROR
        assert config.coerce_all_missing is False

    def test_default_file_in_working_directory_is_read(self, tmp_path):
        (tmp_path / Defaults.CONFIG_FILE).write_text(
            "[load]\nfill = true\n", encoding="utf-8"
        )

        assert ConfigLoader.load().fill is True

    def test_toml_overrides_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("APSIM_FILE_LIMIT", "9")
        monkeypatch.setenv("APSIM_FILL", "true")
        config_file = tmp_path / "custom.toml"
        config_file.write_text("[load]\nfile_limit = 2\n", encoding="utf-8")

        config = ConfigLoader.load(config_file)

        assert config.file_limit == 2
        assert config.fill is True

    def test_invalid_toml_warns_and_keeps_defaults(self, tmp_path):
        config_file = tmp_path / "broken.toml"
        config_file.write_text("[load\nfill = ", encoding="utf-8")

        with pytest.warns(UserWarning, match="Failed to load config"):
            config = ConfigLoader.load(config_file)

        assert config == LoaderConfig()

    def test_invalid_value_warns(self, tmp_path):
        config_file = tmp_path / "bad.toml"
        config_file.write_text('[load]\nfill = "sometimes"\n', encoding="utf-8")

        with pytest.warns(UserWarning, match="load.fill must be a boolean"):
            config = ConfigLoader.load(config_file)

        assert config.fill is False


class TestConstants:
    def test_markers(self):
        assert Markers.FACTORS == "factors = "
        assert Markers.FACTOR_SEPARATOR == ";"
        assert Markers.CONSTANT_ASSIGN == " = "

    def test_missing_value_tokens(self):
        assert MissingValues.TOKENS == frozenset({"?", "*"})

    def test_file_name_column(self):
        assert Columns.FILE_NAME == "fileName"
