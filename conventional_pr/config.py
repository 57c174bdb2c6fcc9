"""
Action configuration management
"""

from functools import lru_cache
from typing import Annotated, Any, Optional
from urllib.parse import urlsplit

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .constants import DEFAULT_API_URL
from .exceptions import (
    ConfigurationError,
    InvalidBaseURLError,
    InvalidBranchPatternError,
    InvalidCommitPatternError,
    InvalidTitlePatternError,
    MissingTokenError,
    NegativeFileChangeError,
)
from .pattern import PatternMatcher


def normalize_base_url(url: str) -> str:
    """Validate an API base URL and make it end with exactly one slash."""
    parsed = urlsplit(url)
    if url != url.strip() or parsed.scheme not in ("http", "https") or not parsed.netloc:
        msg = f"invalid GitHub API URL {url!r}"
        raise InvalidBaseURLError(msg)

    return url.rstrip("/") + "/"


def _compile(value: Any, error: type[ConfigurationError]) -> Optional[PatternMatcher]:
    if isinstance(value, PatternMatcher) or value is None:
        return value
    if not value:
        return None
    return PatternMatcher.compile(value, error)


class Configuration(BaseSettings):
    """Action settings, read once from ``INPUT_*`` environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )

    access_token: str = Field("", repr=False)

    # Gates
    draft: bool = False
    close: bool = False
    bot: bool = False
    ignored_users: Annotated[list[str], NoDecode] = Field(default_factory=list)

    # Rules
    issue: bool = False
    body: bool = False
    signed: bool = False
    maximum_changes: int = 0
    title_pattern: Optional[PatternMatcher] = None
    commit_pattern: Optional[PatternMatcher] = None
    branch_pattern: Optional[PatternMatcher] = None

    # Reporting
    edit: bool = False
    verbose: bool = False
    label: str = ""
    message: str = ""

    api_url: str = Field(
        DEFAULT_API_URL,
        validation_alias=AliasChoices("GITHUB_API_URL", "INPUT_API_URL", "api_url"),
    )

    @field_validator("access_token")
    @classmethod
    def _check_token(cls, value: str) -> str:
        if not value.strip():
            raise MissingTokenError
        return value

    @field_validator("ignored_users", mode="before")
    @classmethod
    def _split_users(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            value = value.split(",")
        return [user.strip() for user in value if user and user.strip()]

    @field_validator("maximum_changes")
    @classmethod
    def _check_maximum_changes(cls, value: int) -> int:
        if value < 0:
            raise NegativeFileChangeError
        return value

    @field_validator("title_pattern", mode="before")
    @classmethod
    def _compile_title(cls, value: Any) -> Optional[PatternMatcher]:
        return _compile(value, InvalidTitlePatternError)

    @field_validator("commit_pattern", mode="before")
    @classmethod
    def _compile_commit(cls, value: Any) -> Optional[PatternMatcher]:
        return _compile(value, InvalidCommitPatternError)

    @field_validator("branch_pattern", mode="before")
    @classmethod
    def _compile_branch(cls, value: Any) -> Optional[PatternMatcher]:
        return _compile(value, InvalidBranchPatternError)

    @field_validator("api_url")
    @classmethod
    def _normalize_api_url(cls, value: str) -> str:
        return normalize_base_url(value)


def read_config() -> Configuration:
    """Read the configuration from the environment.

    Raises
    ------
        ConfigurationError: The first invalid setting, in declaration order

    """
    try:
        return Configuration()
    except ValidationError as e:
        for error in e.errors():
            cause = error.get("ctx", {}).get("error")
            if isinstance(cause, ConfigurationError):
                raise cause from e
        raise ConfigurationError(str(e)) from e


@lru_cache()
def get_config() -> Configuration:
    """Get cached configuration instance"""
    return read_config()
