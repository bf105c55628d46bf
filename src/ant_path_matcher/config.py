"""Pydantic configuration for the Ant path matcher."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PATH_SEPARATOR = "/"
CACHE_TURNOFF_THRESHOLD = 65536


class CacheMode(str, Enum):
    """Pattern cache behaviour"""

    ON = "on"  # Always cache, never deactivate
    OFF = "off"  # Never cache
    AUTO = "auto"  # Cache until the threshold is reached, then turn off for good


class MatcherConfig(BaseModel):
    """Pydantic configuration for AntPathMatcher behaviour"""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    path_separator: str = Field(
        default=DEFAULT_PATH_SEPARATOR,
        min_length=1,
        description="Separator between path segments",
    )
    case_sensitive: bool = Field(default=True, description="Match segments case-sensitively")
    trim_tokens: bool = Field(default=False, description="Strip whitespace around tokens")
    cache_mode: CacheMode = Field(default=CacheMode.AUTO)
    cache_threshold: int = Field(
        default=CACHE_TURNOFF_THRESHOLD,
        ge=1,
        description="Entries per cache after which an auto cache turns itself off",
    )

    @field_validator("path_separator")
    @classmethod
    def validate_path_separator(cls, v: str) -> str:
        """Reject separators made only of whitespace"""
        if v.isspace():
            raise ValueError("Path separator cannot be whitespace")
        return v

    @property
    def ends_on_wildcard(self) -> str:
        return self.path_separator + "*"

    @property
    def ends_on_double_wildcard(self) -> str:
        return self.path_separator + "**"
