from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from click.core import ParameterSource

from ..errors import ConfigError

CONFIG_DIR = Path.home() / ".config" / "inky"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.toml"

KNOWN_KEYS = frozenset(
    {
        "destination",
        "overwrite",
        "recursive",
        "verbose",
        "quiet",
        "engine",
        "markdown_extensions",
        "pandoc_args",
    }
)


def load_config(config_path: str | Path | None, profile: str = "default") -> dict[str, Any]:
    """
    Read one profile table from the TOML config.

    Falls back to ``[default]`` when ``profile`` is absent. A missing file is an
    empty config; a file that does not parse is a ConfigError.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"cannot load config: {e}", path=path) from e

    section = data.get(profile)
    if section is None:
        section = data.get("default", {})
    if not isinstance(section, dict):
        raise ConfigError(f"profile {profile!r} is not a table", path=path)

    unknown = sorted(set(section) - KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}", path=path)
    return dict(section)


def resolve_option(ctx: click.Context, key: str, value: Any, cfg: dict) -> Any:
    """
    Prefer a value given on the command line (or via envvar); otherwise fall back
    to the profile's value, then to the option's own default.
    """
    source = ctx.get_parameter_source(key)
    if source in (ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT):
        return value
    if key in cfg and cfg[key] not in (None, ""):
        return cfg[key]
    return value
