from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .errors import ConfigError


@dataclass(frozen=True)
class SampleConfig:
    include: list[Path] = field(default_factory=list)
    exclude: list[Path] = field(default_factory=list)
    seed: int | None = None
    strip_newlines: bool = False


def _require_mapping(data: object, config_path: Path) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config at '{config_path}' must be a YAML mapping.")
    return data


def _optional_path_list(data: dict, key: str, config_path: Path) -> list[Path]:
    value = data.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ConfigError(
            f"Config key '{key}' in '{config_path}' must be a path or a list of paths."
        )
    out: list[Path] = []
    for i, item in enumerate(value):
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(
                f"Config key '{key}' in '{config_path}' has invalid item at index {i}; "
                "expected non-empty string."
            )
        out.append(Path(item.strip()))
    return out


def load_config(config_path: Path) -> SampleConfig:
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config at '{config_path}' is not valid YAML: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        raise ConfigError(f"Cannot read config '{config_path}': {reason}") from exc

    data = _require_mapping(raw, config_path)
    unknown = sorted(set(data) - {"include", "exclude", "seed", "strip_newlines"})
    if unknown:
        raise ConfigError(f"Unknown config key(s) in '{config_path}': {', '.join(unknown)}.")

    include = _optional_path_list(data, "include", config_path)
    exclude = _optional_path_list(data, "exclude", config_path)

    seed = data.get("seed")
    # bool is an int subclass; reject it explicitly.
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
        raise ConfigError(f"Config key 'seed' in '{config_path}' must be an integer.")

    strip_newlines = data.get("strip_newlines", False)
    if not isinstance(strip_newlines, bool):
        raise ConfigError(f"Config key 'strip_newlines' in '{config_path}' must be a boolean.")

    return SampleConfig(
        include=include,
        exclude=exclude,
        seed=seed,
        strip_newlines=strip_newlines,
    )
