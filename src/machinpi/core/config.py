"""Default config generation, validation, and loading."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import TypedDict

from machinpi.core.machin import AUTO_GUARD, GUARD_DIGITS, validate_guard_digits

CONFIG_FILENAME = "machinpi.json"
CONFIG_ENV_VAR = "MACHINPI_CONFIG"


class ConfigError(ValueError):
    """Raised when a config file is missing, unreadable, or invalid."""


class MachinpiConfig(TypedDict):
    schema_version: int
    default_digits: int
    guard_digits: int | str
    parallel: bool


def default_config() -> MachinpiConfig:
    """Return the default configuration.

    The returned dict, when serialized with
    ``json.dumps(data, sort_keys=True, indent=2) + "\\n"``,
    produces the canonical default machinpi.json.
    """
    return {
        "schema_version": 1,
        "default_digits": 1000,
        "guard_digits": GUARD_DIGITS,
        "parallel": False,
    }


def serialize_config(config: MachinpiConfig | dict[str, object]) -> str:
    """Serialize a config dict to the canonical JSON format."""
    return json.dumps(config, sort_keys=True, indent=2) + "\n"


def validate_default_digits(value: object) -> bool:
    """Return True if *value* is a usable default digit count."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_config(config: dict) -> MachinpiConfig:
    """Check every key of *config* and return it typed.

    Raises ConfigError naming the first offending key.
    """
    expected = set(default_config())
    unknown = sorted(set(config) - expected)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    if config.get("schema_version") != 1:
        raise ConfigError(
            f"Unsupported schema_version: {config.get('schema_version')!r}"
        )
    if not validate_default_digits(config.get("default_digits")):
        raise ConfigError(
            f"Invalid default_digits: {config.get('default_digits')!r}. "
            "Must be a non-negative integer."
        )
    if not validate_guard_digits(config.get("guard_digits")):
        raise ConfigError(
            f"Invalid guard_digits: {config.get('guard_digits')!r}. "
            f"Must be a non-negative integer or '{AUTO_GUARD}'."
        )
    if not isinstance(config.get("parallel"), bool):
        raise ConfigError(
            f"Invalid parallel: {config.get('parallel')!r}. Must be true or false."
        )
    return config  # type: ignore[return-value]


def load_config(path: Path | None) -> MachinpiConfig:
    """Load *path* over the defaults; ``None`` yields the defaults."""
    config: dict = dict(default_config())
    if path is None:
        return config  # type: ignore[return-value]

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}")
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {e}")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    config.update(data)
    return validate_config(config)


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file to use.

    Resolution order:
    1. ``MACHINPI_CONFIG`` env var (must point to an existing file).
    2. ``machinpi.json`` in *start* (defaults to cwd).
    3. ``None``: use the defaults.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if not p.is_file():
            raise ConfigError(f"{CONFIG_ENV_VAR} points to a missing file: {env_path}")
        return p

    candidate = (start or Path.cwd()) / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None
