from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from .rules import DEFAULT_ENCODING, MAX_UPLOAD_BYTES

ENV_PREFIX = "TABPARSE_"


class Settings(BaseModel):
    """Service settings, overridable through TABPARSE_* environment variables."""

    max_upload_bytes: int = Field(default=MAX_UPLOAD_BYTES, gt=0)
    log_level: str = "WARNING"
    default_encoding: str = DEFAULT_ENCODING

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = str(env.get(ENV_PREFIX + name.upper()) or "").strip()
            if raw:
                values[name] = raw
        return cls(**values)


def configure_logging(level: str) -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger(__package__).setLevel(level)
