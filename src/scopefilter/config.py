"""
TOML-based config file loading for scopefilter.

Searches for `.scopefilter.toml`, `scopefilter.toml`, or `pyproject.toml
[tool.scopefilter]` walking up from a start directory. Values set explicitly
by the caller take precedence over config file values.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, cast

from scopefilter.errors import ConfigError
from scopefilter.generate import generate_includes_excludes, get_resource_includes_excludes
from scopefilter.includes_excludes import IncludesExcludes
from scopefilter.resources import ResourceResolver
from scopefilter.validation import (
    check_includes_excludes,
    validate_includes_excludes,
    validate_namespace_includes_excludes,
)

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

logger = logging.getLogger(__name__)


@dataclass
class ScopeFilterConfig:
    """
    Parsed config from a TOML file. Fields are `None` when not set, so that
    merging can tell "not configured" from "explicitly empty".
    """

    include_namespaces: list[str] | None = None
    exclude_namespaces: list[str] | None = None
    include_resources: list[str] | None = None
    exclude_resources: list[str] | None = None

    def namespace_filter(self) -> IncludesExcludes:
        """
        Validate the namespace lists and build a filter from them.
        Raises `InvalidIncludesExcludesError` if they are invalid.
        """
        includes = self.include_namespaces or []
        excludes = self.exclude_namespaces or []
        check_includes_excludes(validate_namespace_includes_excludes(includes, excludes))
        return generate_includes_excludes(includes, excludes, lambda item: item)

    def resource_filter(self, resolver: ResourceResolver) -> IncludesExcludes:
        """
        Validate the resource lists and build a filter of resolved resource names.
        Raises `InvalidIncludesExcludesError` if they are invalid.
        """
        includes = self.include_resources or []
        excludes = self.exclude_resources or []
        check_includes_excludes(validate_includes_excludes(includes, excludes))
        return get_resource_includes_excludes(resolver, includes, excludes)


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".scopefilter.toml", "scopefilter.toml", "pyproject.toml"]

_VALID_FIELDS = {f.name for f in fields(ScopeFilterConfig)}


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.scopefilter.toml` >
    `scopefilter.toml` > `pyproject.toml` (only if it has `[tool.scopefilter]`).
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                if filename == "pyproject.toml":
                    if _pyproject_has_scopefilter_section(candidate):
                        logger.debug("Using config file %s", candidate)
                        return candidate
                else:
                    logger.debug("Using config file %s", candidate)
                    return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _pyproject_has_scopefilter_section(path: Path) -> bool:
    """Check if a pyproject.toml has a [tool.scopefilter] section."""
    try:
        data = tomllib.loads(path.read_text())
        return "scopefilter" in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError):
        return False


def load_config(config_path: Path) -> ScopeFilterConfig:
    """
    Load a `ScopeFilterConfig` from a TOML file, either a standalone
    `scopefilter.toml` / `.scopefilter.toml` or a `pyproject.toml` (from
    `[tool.scopefilter]`).
    """
    data = tomllib.loads(config_path.read_text())

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("scopefilter", {})

    return parse_config_data(data)


def parse_config_data(data: dict[str, Any]) -> ScopeFilterConfig:
    """
    Parse a flat or sectioned TOML dict. Tables like `[filters]` merge into the
    top level; kebab-case keys map to snake_case fields and unknown keys are
    ignored.
    """
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            for sub_key, sub_value in cast(dict[str, Any], value).items():
                flat[sub_key] = sub_value
        else:
            flat[key] = value

    mapped: dict[str, list[str]] = {}
    for key, value in flat.items():
        snake_key = key.replace("-", "_")
        if snake_key in _VALID_FIELDS:
            mapped[snake_key] = _as_string_list(key, value)

    return ScopeFilterConfig(**mapped)


def _as_string_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list):
        raise ConfigError(f"{key} must be a list of strings, got {type(value).__name__}")
    items = cast(list[Any], value)
    for item in items:
        if not isinstance(item, str):
            raise ConfigError(f"{key} must be a list of strings, got item {item!r}")
    return cast(list[str], items)


def merge_with_config(
    explicit: ScopeFilterConfig, config: ScopeFilterConfig | None
) -> ScopeFilterConfig:
    """
    Merge explicitly set values with config file settings. Fields set in
    `explicit` win; unset fields fall back to `config`.
    """
    if config is None:
        return explicit

    overrides: dict[str, Any] = {}
    for cfg_field in fields(ScopeFilterConfig):
        if getattr(explicit, cfg_field.name) is None:
            cfg_value = getattr(config, cfg_field.name)
            if cfg_value is not None:
                overrides[cfg_field.name] = cfg_value

    return replace(explicit, **overrides)
