"""Layered configuration for the rules synchronizer."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from jsonschema import Draft202012Validator

from cursor_rules_sync.constants import (
    APP_NAME,
    CONFIG_FILENAME,
    DEFAULT_BRANCH,
    DEFAULT_CACHE_DIRNAME,
    DEFAULT_REMOTE,
    DEFAULT_REPO_URL,
    ENV_BRANCH,
    ENV_CACHE_DIR,
    ENV_REPO_URL,
    RULES_FILENAME,
    TARGET_FILENAME,
)
from cursor_rules_sync.errors import InvalidConfigSchemaError, InvalidJsonFormatError
from cursor_rules_sync.utils import read_json_safe


CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "repo_url": {"type": "string", "minLength": 1},
        "cache_dir": {"type": "string", "minLength": 1},
        "branch": {"type": "string", "minLength": 1},
        "remote": {"type": "string", "minLength": 1},
        "rules_filename": {"type": "string", "minLength": 1},
        "target_filename": {"type": "string", "minLength": 1},
    },
}


@dataclass(frozen=True)
class SyncConfig:
    repo_url: str
    cache_dir: Path
    branch: str = DEFAULT_BRANCH
    remote: str = DEFAULT_REMOTE
    rules_filename: str = RULES_FILENAME
    target_filename: str = TARGET_FILENAME

    @classmethod
    def defaults(cls) -> "SyncConfig":
        return cls(repo_url=DEFAULT_REPO_URL, cache_dir=Path.home() / DEFAULT_CACHE_DIRNAME)

    @property
    def rules_path(self) -> Path:
        return self.cache_dir / self.rules_filename

    def with_overrides(self, **overrides: Any) -> "SyncConfig":
        values = {key: value for key, value in overrides.items() if value is not None}
        if "cache_dir" in values:
            values["cache_dir"] = Path(values["cache_dir"]).expanduser()
        return replace(self, **values)


def default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / APP_NAME / CONFIG_FILENAME


def load_config_file(path: Path) -> dict[str, Any]:
    payload, error = read_json_safe(path)
    if error is not None:
        raise InvalidJsonFormatError(path, error)
    if payload is None:
        return {}

    validator = Draft202012Validator(CONFIG_SCHEMA)
    problems = sorted(validator.iter_errors(payload), key=lambda item: list(item.path))
    if problems:
        first = problems[0]
        location = ".".join(str(part) for part in first.path) or "<root>"
        raise InvalidConfigSchemaError(path, f"{location}: {first.message}")
    return payload


def load_config(
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> SyncConfig:
    """Resolve configuration from defaults, the JSON file, the environment and overrides.

    Later layers win. ``overrides`` with a ``None`` value are ignored so click
    options that were not passed fall through to the lower layers.
    """
    env = os.environ if env is None else env
    config = SyncConfig.defaults()
    config = config.with_overrides(**load_config_file(config_path or default_config_path()))
    config = config.with_overrides(
        repo_url=env.get(ENV_REPO_URL) or None,
        cache_dir=env.get(ENV_CACHE_DIR) or None,
        branch=env.get(ENV_BRANCH) or None,
    )
    return config.with_overrides(**overrides)
