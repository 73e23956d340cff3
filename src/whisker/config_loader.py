"""Load WhiskerConfig from whisker.yaml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from whisker._errors import ConfigError
from whisker.config import WhiskerConfig

_CONFIG_KEYS = frozenset({
    "pages_dir", "theme", "theme_config", "locales", "default_locale",
    "search_index", "production", "asset_dir", "raw_query",
    "router_module", "ssg_module",
})


def load_config(root: Path, **overrides: object) -> WhiskerConfig:
    """Load WhiskerConfig from root, optionally merging whisker.yaml.

    Looks for whisker.yaml, whisker.yml, or whisker.toml in root. If found,
    loads and merges with overrides. Overrides that are ``None`` are ignored
    so CLI flags left unset do not clobber file values.
    """
    file_config = _read_whisker_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    if "locales" in merged and not isinstance(merged["locales"], tuple):
        merged["locales"] = tuple(str(loc) for loc in merged["locales"])  # type: ignore[union-attr]
    return WhiskerConfig(root=root, **merged)  # type: ignore[arg-type]


def _read_whisker_config(root: Path) -> dict[str, object]:
    """Read whisker config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("whisker.yaml", "whisker.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "whisker.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Cannot load {path.name}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path.name} must contain a mapping"
        raise ConfigError(msg)
    return _flatten_whisker_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Cannot load {path.name}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_whisker_section(data)


def _flatten_whisker_section(data: dict[str, object]) -> dict[str, object]:
    """Extract whisker.* keys into top-level config. Unknown keys are dropped."""
    result: dict[str, object] = {}
    section = data.get("whisker")
    if isinstance(section, dict):
        for k, v in section.items():
            if k in _CONFIG_KEYS:
                result[k] = v
    for k, v in data.items():
        if k != "whisker" and k in _CONFIG_KEYS:
            result[k] = v
    return result
