"""Configuration: built-in defaults merged with per-invocation overrides (nothing is read from disk)."""

from __future__ import annotations

import codecs
from typing import Any

from filerw.reader.models import ReadPolicy


def default_config() -> dict[str, Any]:
    """Built-in defaults; the read tiers match ReadPolicy()."""
    return {
        "read": {
            "tiers": [
                {"max_bytes": 1_048_576, "workers": 1},
                {"max_bytes": 134_217_728, "workers": 8},
            ],
            "max_workers": 16,
            "encoding": "utf-8",
            "errors": "replace",
        },
        "write": {
            "create_parents": False,
        },
        "logging": {
            "level": "INFO",
            "file": None,
        },
    }


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Defaults with `overrides` merged on top. Keys set to None in overrides are ignored."""
    merged = default_config()
    if overrides:
        _deep_merge(merged, _drop_none(overrides))
    return merged


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            result[key] = _drop_none(value)
        elif value is not None:
            result[key] = value
    return result


def config_from_args(args: Any) -> dict[str, Any]:
    """
    Build the config for one CLI invocation from parsed arguments.

    Recognized attributes (all optional): tiers [(max_bytes, workers), ...],
    max_workers, encoding, errors, create_parents, log_file.
    """
    tiers = getattr(args, "tiers", None)
    create_parents = getattr(args, "create_parents", None)
    overrides = {
        "read": {
            "tiers": (
                [{"max_bytes": m, "workers": w} for m, w in tiers] if tiers is not None else None
            ),
            "max_workers": getattr(args, "max_workers", None),
            "encoding": getattr(args, "encoding", None),
            "errors": getattr(args, "errors", None),
        },
        "write": {"create_parents": create_parents or None},
        "logging": {"file": getattr(args, "log_file", None)},
    }
    return load_config(overrides)


def read_policy(config: dict[str, Any]) -> ReadPolicy:
    """ReadPolicy from the `read` section. Raises ValueError on bad tiers or worker counts."""
    try:
        return ReadPolicy.from_dict(config.get("read") or {})
    except (KeyError, TypeError) as e:
        raise ValueError(f"invalid read policy: {e}") from e


def decoding(config: dict[str, Any]) -> tuple[str, str]:
    """(encoding, errors) from the `read` section. Unknown codecs or handlers raise ValueError."""
    read_cfg = config.get("read") or {}
    encoding = read_cfg.get("encoding") or "utf-8"
    errors = read_cfg.get("errors") or "replace"
    try:
        codecs.lookup(encoding)
        codecs.lookup_error(errors)
    except LookupError as e:
        raise ValueError(str(e)) from e
    return encoding, errors
