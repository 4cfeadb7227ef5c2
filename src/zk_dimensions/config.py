"""Feature configuration loading."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from zk_dimensions.features import KNOWN_FEATURES, Features

logger = logging.getLogger(__name__)

FEATURES_ENV_VAR = "ZK_DIMENSIONS_FEATURES"


class ConfigError(ValueError):
    """Raised when feature config is invalid."""


def _load_toml(path: Path) -> dict[str, Any]:
    raw = path.read_text(encoding="utf-8")

    try:  # Python 3.11+
        import tomllib  # type: ignore[attr-defined]
        try:
            return tomllib.loads(raw)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc
    except ModuleNotFoundError:
        try:
            import tomli
        except ModuleNotFoundError as exc:
            raise ConfigError("toml parser unavailable; install tomli for Python < 3.11") from exc
        try:
            return tomli.loads(raw)
        except tomli.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc


def _to_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "1", "yes", "on"}:
            return True
        if lowered in {"false", "0", "no", "off"}:
            return False
    raise ConfigError(f"{field_name} must be a boolean")


def _features_from_env(raw: str) -> Features:
    names = [name.strip().lower() for name in raw.split(",") if name.strip()]
    unknown = sorted(set(names) - set(KNOWN_FEATURES))
    if unknown:
        raise ConfigError(
            f"unknown feature(s) in {FEATURES_ENV_VAR}: {', '.join(unknown)}; "
            f"known features: {', '.join(KNOWN_FEATURES)}"
        )
    return Features(**{name: name in names for name in KNOWN_FEATURES})


def load_features(path: str | Path | None = None) -> Features:
    """Resolve the enabled optional features.

    ``ZK_DIMENSIONS_FEATURES`` (comma-separated names) wins over the file when
    set. Otherwise the TOML file at ``path`` is read, from a ``[features]``
    table or from top-level keys. A missing file means no optional features.
    """
    env_features = os.getenv(FEATURES_ENV_VAR)
    if env_features is not None:
        logger.debug("feature set taken from %s=%r", FEATURES_ENV_VAR, env_features)
        return _features_from_env(env_features)

    if path is None:
        return Features()
    config_path = Path(path)
    if not config_path.exists():
        return Features()

    parsed = _load_toml(config_path)
    section = parsed.get("features")
    if isinstance(section, dict):
        source = section
    elif section is None:
        source = parsed
    else:
        raise ConfigError("[features] must be a table")

    unknown = sorted(set(source) - set(KNOWN_FEATURES))
    if unknown:
        raise ConfigError(f"unknown feature(s) in {config_path}: {', '.join(unknown)}")

    return Features(
        **{name: _to_bool(source.get(name, False), name) for name in KNOWN_FEATURES}
    )
