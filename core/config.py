# core/config.py
from __future__ import annotations
import string
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Literal, Mapping, Optional

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ConfigurationError

DEFAULT_SPECIAL = "!@#$%^&*()-_=+[]{}|;:,.<>?"
# Characters easily confused in common fonts
DEFAULT_AMBIGUOUS = "0OlI1"

ENV_PREFIX = "VLABS_"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


@dataclass(frozen=True)
class CharacterTables:
    upper: str = string.ascii_uppercase
    lower: str = string.ascii_lowercase
    digits: str = string.digits
    special: str = DEFAULT_SPECIAL


@dataclass(frozen=True)
class AppConfig:
    """
    Immutable settings passed explicitly into the generator and the front ends.
    Build with load_config(); derive variants with with_special().
    """
    tables: CharacterTables = field(default_factory=CharacterTables)
    ambiguous: FrozenSet[str] = frozenset(DEFAULT_AMBIGUOUS)
    default_length: int = 16
    min_length: int = 1
    max_length: int = 128
    max_count: int = 50
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def with_special(self, special: Optional[str]) -> "AppConfig":
        """Return a copy using a custom special-character set (empty/None keeps the current one)."""
        if not special:
            return self
        # de-dup, giữ thứ tự
        chars = "".join(dict.fromkeys(special))
        return replace(self, tables=replace(self.tables, special=chars))


DEFAULT_CONFIG = AppConfig()


class Settings(BaseSettings):
    """VLABS_* environment variables."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_ignore_empty=True, frozen=True)

    special_chars: Optional[str] = None
    default_length: int = Field(default=DEFAULT_CONFIG.default_length, ge=DEFAULT_CONFIG.min_length)
    max_length: int = Field(default=DEFAULT_CONFIG.max_length, ge=DEFAULT_CONFIG.min_length)
    max_count: int = Field(default=DEFAULT_CONFIG.max_count, ge=1)
    log_level: LogLevel = "INFO"
    log_file: Optional[str] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("log_file", mode="before")
    @classmethod
    def _blank_log_file(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def _default_within_max(self) -> "Settings":
        if self.default_length > self.max_length:
            raise ValueError(
                f"{ENV_PREFIX}DEFAULT_LENGTH ({self.default_length}) must not exceed "
                f"{ENV_PREFIX}MAX_LENGTH ({self.max_length})"
            )
        return self

    def to_config(self) -> AppConfig:
        cfg = replace(
            DEFAULT_CONFIG,
            default_length=self.default_length,
            max_length=self.max_length,
            max_count=self.max_count,
            log_level=self.log_level,
            log_file=self.log_file,
        )
        return cfg.with_special(self.special_chars)


def _from_mapping(environ: Mapping[str, str]) -> dict:
    values = {}
    for key, raw in environ.items():
        if key.upper().startswith(ENV_PREFIX) and raw != "":
            values[key[len(ENV_PREFIX):].lower()] = raw
    return values


def _describe(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        where = f"{ENV_PREFIX}{str(err['loc'][0]).upper()}: " if err.get("loc") else ""
        parts.append(f"{where}{err['msg']}")
    return "; ".join(parts)


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Build an AppConfig from VLABS_* environment variables:
      VLABS_SPECIAL_CHARS, VLABS_DEFAULT_LENGTH, VLABS_MAX_LENGTH,
      VLABS_MAX_COUNT, VLABS_LOG_LEVEL, VLABS_LOG_FILE
    An explicit mapping replaces the process environment (used by tests).
    """
    try:
        if environ is None:
            settings = Settings()
        else:
            settings = Settings.model_validate(_from_mapping(environ))
    except ValidationError as e:
        raise ConfigurationError(_describe(e)) from e
    return settings.to_config()
