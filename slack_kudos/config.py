"""Pydantic-based configuration helpers for the Slack kudos bot."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Iterable, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class AppSettings(BaseModel):
    """Settings required to talk to Slack and verify its requests."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bot_token: str = Field(..., alias="SLACK_BOT_TOKEN", min_length=1)
    channel_id: str = Field(..., alias="SLACK_CHANNEL_ID", min_length=1)
    signing_secret: str = Field(..., alias="SLACK_SIGNING_SECRET", min_length=1)
    api_timeout: int = Field(10, alias="SLACK_API_TIMEOUT")

    @field_validator("bot_token", "channel_id", "signing_secret", mode="before")
    @classmethod
    def _strip(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("api_timeout")
    @classmethod
    def _ensure_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Slack API timeout must be greater than zero")
        return value


# Blank values are stripped before validation and count as missing.
_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


def _format_missing(fields: Iterable[str]) -> str:
    """Return a human-friendly comma-separated list of missing env vars."""

    unique: List[str] = []
    for field in fields:
        if field not in unique:
            unique.append(field)
    return ", ".join(unique)


@lru_cache()
def get_settings() -> AppSettings:
    """Fetch and cache settings from environment variables."""

    try:
        return AppSettings.model_validate(dict(os.environ))
    except ValidationError as exc:
        missing: List[str] = []
        invalid: List[str] = []
        for error in exc.errors():
            name = str(error["loc"][0])
            if error["type"] in _MISSING_ERROR_TYPES:
                missing.append(name)
            else:
                invalid.append(name)

        problems = []
        if missing:
            problems.append(f"Missing required environment variables: {_format_missing(missing)}")
        if invalid:
            problems.append(f"Invalid environment variables: {_format_missing(invalid)}")
        raise RuntimeError("; ".join(problems)) from exc
