"""Load PrerenderConfig from prerender.yaml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from prerender._errors import ConfigError
from prerender.config import PrerenderConfig

_CONFIG_KEYS: frozenset[str] = frozenset({
    "build_dir",
    "output",
    "entry",
    "paths",
    "locals",
    "globals",
    "crawl",
    "public_path",
})


def load_config(root: Path, **overrides: object) -> PrerenderConfig:
    """Load PrerenderConfig from root, optionally merging prerender.yaml.

    Looks for prerender.yaml, prerender.yml, or prerender.toml in root. If
    found, loads and merges with overrides. Overrides take precedence;
    overrides whose value is ``None`` are ignored so unset CLI flags do not
    mask file values.

    Raises:
        ConfigError: If a config file cannot be parsed, holds unknown keys or
            invalid values, or the output directory would overwrite the
            project or its build.

    """
    file_config = _read_prerender_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    unknown = sorted(set(merged) - _CONFIG_KEYS)
    if unknown:
        msg = f"Unknown config option(s): {', '.join(unknown)}"
        raise ConfigError(msg)
    if "crawl" in merged and not isinstance(merged["crawl"], bool):
        msg = f"Option 'crawl' must be true or false, got {merged['crawl']!r}"
        raise ConfigError(msg)
    # Normalize output to Path
    if "output" in merged and not isinstance(merged["output"], Path):
        merged["output"] = Path(str(merged["output"]))
    if "paths" in merged and isinstance(merged["paths"], list):
        merged["paths"] = tuple(str(p) for p in merged["paths"])
    config = PrerenderConfig(root=root, **merged)
    _check_output_path(config)
    return config


def _check_output_path(config: PrerenderConfig) -> None:
    """Refuse output directories whose cleanup would delete the project or build.

    The output directory is removed before writing, so it must not be the
    project root, the build directory, or any directory containing them, and
    it must not sit inside the build directory.

    """
    output = config.output_path.resolve()
    build = config.build_path.resolve()
    for protected in (config.root.resolve(), build):
        if protected.is_relative_to(output):
            msg = f"Output directory {output} would overwrite {protected}"
            raise ConfigError(msg)
    if output.is_relative_to(build):
        msg = f"Output directory {output} is inside the build directory {build}"
        raise ConfigError(msg)


def _read_prerender_config(root: Path) -> dict[str, object]:
    """Read prerender config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("prerender.yaml", "prerender.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "prerender.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    return _flatten_prerender_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_prerender_section(data)


def _flatten_prerender_section(data: dict[str, object]) -> dict[str, object]:
    """Extract prerender.* keys into top-level config."""
    result: dict[str, object] = {}
    section = data.get("prerender")
    if isinstance(section, dict):
        for k, v in section.items():
            result[k] = v
    for k, v in data.items():
        if k != "prerender" and k in _CONFIG_KEYS:
            result[k] = v
    return result
