"""Configuration management for mentiontag."""

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .tokenizer import is_mention_name


class UserConfig(BaseModel):
    """A user directory entry."""

    user_id: int = Field(..., ge=0, description="Stable unique user id")
    name: str = Field(..., min_length=1, description="Display name used in mentions")

    @field_validator("name")
    @classmethod
    def check_mention_name(cls, value: str) -> str:
        if not is_mention_name(value):
            raise ValueError(f"Name must be letters, digits or underscores: {value!r}")
        return value


class SeedCommentConfig(BaseModel):
    """A comment loaded into the store at startup."""

    author_id: int = 0
    text: str = Field(..., min_length=1)
    tagged_user_ids: list[int] = Field(default_factory=list)


def _default_users() -> list[UserConfig]:
    return [
        UserConfig(user_id=1, name="Kevin"),
        UserConfig(user_id=2, name="Jeff"),
        UserConfig(user_id=3, name="Bryan"),
        UserConfig(user_id=4, name="Gabbey"),
    ]


class DirectoryConfig(BaseModel):
    """User directory settings."""

    users: list[UserConfig] = Field(default_factory=_default_users)

    @model_validator(mode="after")
    def check_unique_ids(self) -> "DirectoryConfig":
        seen: set[int] = set()
        for user in self.users:
            if user.user_id in seen:
                raise ValueError(f"Duplicate user_id in directory: {user.user_id}")
            seen.add(user.user_id)
        return self


class CommentsConfig(BaseModel):
    """Comment store settings."""

    seed: list[SeedCommentConfig] = Field(default_factory=list)


class SessionConfig(BaseModel):
    """Editing session settings."""

    author_id: int = Field(default=0, ge=0, description="Author recorded on posted comments")


class RenderingConfig(BaseModel):
    """Markup settings."""

    emphasis_tag: Literal["b", "strong", "em", "mark"] = "b"


class NotificationConfig(BaseModel):
    """Alert settings."""

    header: str = "Sending alerts to:"
    display_seconds: float = Field(default=2.0, gt=0, description="How long alerts stay visible")


class Config(BaseModel):
    """Root configuration model."""

    directory: DirectoryConfig = DirectoryConfig()
    comments: CommentsConfig = CommentsConfig()
    session: SessionConfig = SessionConfig()
    rendering: RenderingConfig = RenderingConfig()
    notifications: NotificationConfig = NotificationConfig()

    @model_validator(mode="after")
    def check_seed_tags(self) -> "Config":
        known = {user.user_id for user in self.directory.users}
        for comment in self.comments.seed:
            unknown = [uid for uid in comment.tagged_user_ids if uid not in known]
            if unknown:
                raise ValueError(f"Seed comment tags unknown user ids: {unknown}")
        return self


def load_config(config_path: str | Path = "config.yaml") -> Config:
    """Load and validate configuration from YAML file.

    Supports ${VAR_NAME} syntax for environment variable expansion.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValidationError: If config is invalid.
        ValueError: If referenced environment variable is not set.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.example.yaml to config.yaml and adjust the user directory."
        )

    with path.open() as f:
        raw_config = yaml.safe_load(f) or {}

    # Expand environment variables in the format ${VAR_NAME}
    def expand_env_vars(obj):
        if isinstance(obj, dict):
            return {k: expand_env_vars(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [expand_env_vars(item) for item in obj]
        elif isinstance(obj, str) and obj.startswith("${") and obj.endswith("}"):
            env_var = obj[2:-1]
            value = os.getenv(env_var)
            if value is None:
                raise ValueError(f"Environment variable '{env_var}' is not set")
            return value
        return obj

    raw_config = expand_env_vars(raw_config)

    return Config(**raw_config)
