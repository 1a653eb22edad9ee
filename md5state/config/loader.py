"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import Md5StateConfig

CONFIG_ENV_VAR = "MD5STATE_CONFIG"


def _candidate_paths(path: str | None) -> list[Path]:
    """Config locations in priority order: explicit, $MD5STATE_CONFIG, project-local, user-global."""
    candidates = [Path(p) for p in (path, os.environ.get(CONFIG_ENV_VAR)) if p]
    candidates.append(Path("md5state.yaml"))
    candidates.append(Path.home() / ".md5state" / "config.yaml")
    return candidates


def _read_yaml(candidate: Path) -> object:
    try:
        text = candidate.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Cannot read config {candidate}: {getattr(e, 'strerror', None) or e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {candidate}: {e}") from e


def load_config(path: str | None = None) -> Md5StateConfig:
    """Return the first non-empty config found, or the built-in defaults.

    Every failure (unreadable file, bad YAML, schema violation) is raised as
    ValueError naming the offending file.
    """
    for candidate in _candidate_paths(path):
        if not candidate.exists():
            continue
        raw = _read_yaml(candidate)
        if raw is None:
            continue
        try:
            return Md5StateConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {candidate}: {e}") from e

    return Md5StateConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj
