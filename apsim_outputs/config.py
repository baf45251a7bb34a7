from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import re
import tomllib
from typing import cast
import warnings

from .constants import Defaults
from .domain.entities.policies import DuplicateConstantPolicy, ErrorPolicy

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    file_filter: str = Defaults.FILE_FILTER
    encoding: str = Defaults.ENCODING
    file_limit: int = Defaults.FILE_LIMIT
    fill: bool = Defaults.FILL
    add_constants: bool = Defaults.ADD_CONSTANTS
    skip_empty_files: bool = Defaults.SKIP_EMPTY_FILES
    error_policy: ErrorPolicy = ErrorPolicy.ABORT
    duplicate_constants: DuplicateConstantPolicy = DuplicateConstantPolicy.LAST_WINS
    coerce_all_missing: bool = Defaults.COERCE_ALL_MISSING

    def __post_init__(self) -> None:
        if self.file_limit < 0:
            raise ValueError(
                "file_limit must be zero (unlimited) or positive, "
                f"got {self.file_limit}"
            )
        if not self.encoding:
            raise ValueError("encoding must not be empty")
        try:
            re.compile(self.file_filter)
        except re.error as e:
            raise ValueError(
                "file_filter is not a valid regular expression: "
                f"{self.file_filter!r} ({e})"
            ) from e
        if not isinstance(self.error_policy, ErrorPolicy):
            raise ValueError(
                f"error_policy must be an ErrorPolicy, got {self.error_policy!r}"
            )
        if not isinstance(self.duplicate_constants, DuplicateConstantPolicy):
            raise ValueError(
                "duplicate_constants must be a DuplicateConstantPolicy, "
                f"got {self.duplicate_constants!r}"
            )

    @classmethod
    def from_env(cls) -> LoaderConfig:
        return cls(
            file_filter=os.getenv("APSIM_FILTER", Defaults.FILE_FILTER),
            encoding=os.getenv("APSIM_ENCODING", Defaults.ENCODING),
            file_limit=int(os.getenv("APSIM_FILE_LIMIT", str(Defaults.FILE_LIMIT))),
            fill=_env_bool("APSIM_FILL", Defaults.FILL),
            add_constants=_env_bool("APSIM_ADD_CONSTANTS", Defaults.ADD_CONSTANTS),
            skip_empty_files=_env_bool("APSIM_SKIP_EMPTY", Defaults.SKIP_EMPTY_FILES),
            error_policy=ErrorPolicy(
                os.getenv("APSIM_ERROR_POLICY", Defaults.ERROR_POLICY).strip().lower()
            ),
            duplicate_constants=DuplicateConstantPolicy(
                os.getenv("APSIM_DUPLICATE_CONSTANTS", Defaults.DUPLICATE_CONSTANTS)
                .strip()
                .lower()
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> LoaderConfig:
        config = LoaderConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: LoaderConfig) -> LoaderConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        load_section = _get_table(data, "load")
        parse_section = _get_table(data, "parse")

        file_filter = base_config.file_filter
        if (value := load_section.get("filter")) is not None:
            file_filter = str(value)
        file_limit = base_config.file_limit
        if (value := load_section.get("file_limit")) is not None:
            file_limit = _coerce_int(value, key="load.file_limit")
        fill = base_config.fill
        if (value := load_section.get("fill")) is not None:
            fill = _coerce_bool(value, key="load.fill")
        skip_empty_files = base_config.skip_empty_files
        if (value := load_section.get("skip_empty_files")) is not None:
            skip_empty_files = _coerce_bool(value, key="load.skip_empty_files")
        error_policy = base_config.error_policy
        if (value := load_section.get("error_policy")) is not None:
            error_policy = ErrorPolicy(str(value).strip().lower())

        encoding = base_config.encoding
        if (value := parse_section.get("encoding")) is not None:
            encoding = str(value)
        add_constants = base_config.add_constants
        if (value := parse_section.get("add_constants")) is not None:
            add_constants = _coerce_bool(value, key="parse.add_constants")
        duplicate_constants = base_config.duplicate_constants
        if (value := parse_section.get("duplicate_constants")) is not None:
            duplicate_constants = DuplicateConstantPolicy(str(value).strip().lower())
        coerce_all_missing = base_config.coerce_all_missing
        if (value := parse_section.get("coerce_all_missing")) is not None:
            coerce_all_missing = _coerce_bool(value, key="parse.coerce_all_missing")

        return LoaderConfig(
            file_filter=file_filter,
            encoding=encoding,
            file_limit=file_limit,
            fill=fill,
            add_constants=add_constants,
            skip_empty_files=skip_empty_files,
            error_policy=error_policy,
            duplicate_constants=duplicate_constants,
            coerce_all_missing=coerce_all_missing,
        )


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return _coerce_bool(raw, key=name)


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
