"""Runtime settings loaded from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .schema import DEFAULT_SCHEMA_DIR

_ENV_PREFIX = "SCHEMAROUTE_"


@dataclass(slots=True)
class Settings:
    """Container for service settings."""

    host: str = "0.0.0.0"
    port: int = 8001
    log_level: str = "INFO"
    schema_dir: Path = field(default_factory=lambda: DEFAULT_SCHEMA_DIR)
    expose_schemas: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            host=os.getenv(f"{_ENV_PREFIX}HOST", defaults.host),
            port=int(os.getenv(f"{_ENV_PREFIX}PORT", str(defaults.port))),
            log_level=os.getenv(f"{_ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            schema_dir=Path(os.getenv(f"{_ENV_PREFIX}SCHEMA_DIR", str(defaults.schema_dir))),
            expose_schemas=_env_flag(f"{_ENV_PREFIX}EXPOSE_SCHEMAS", default=defaults.expose_schemas),
        )


def _env_flag(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}
