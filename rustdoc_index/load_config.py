"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from rustdoc_index.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "payload": {
        "variable": "searchIndex",
        "initializer": "initSearch",
    },
    "parsing": {
        "allow_unknown_kinds": False,
    },
    "logging": {
        "level": "WARNING",
    },
}


def merge_config(user_config: dict[str, Any] | None = None) -> dict[str, Any]:
    """Merge a possibly partial configuration over the defaults."""
    user_config = user_config or {}
    for section in DEFAULT_CONFIG:
        if section in user_config and not isinstance(user_config[section], dict):
            value = user_config[section]
            msg = f"Configuration section '{section}' must be a mapping, got {value!r}"
            raise ValueError(msg)
    return deep_merge(copy.deepcopy(DEFAULT_CONFIG), user_config)


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration file must contain a mapping: {p}"
                raise ValueError(msg)
            return merge_config(user_config)
    return merge_config()
