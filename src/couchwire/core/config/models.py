"""
Configuration models for couchwire.

Pydantic-based models that validate client settings, plus the
environment-variable settings that can override them.
"""

import codecs
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from couchwire.core.constants import HttpConstants


class ClientConfig(BaseModel):
    """Transport configuration for a CouchClient."""

    timeout: Optional[float] = Field(
        None,
        gt=0,
        description="Request timeout in seconds (None uses the transport default)",
    )
    encoding: str = Field(
        HttpConstants.DEFAULT_ENCODING,
        description="Encoding for request and response bodies",
    )
    user_agent: Optional[str] = Field(None, description="User-Agent header value")

    model_config = {
        "extra": "forbid",
        "frozen": True,
        "str_strip_whitespace": True,
    }

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v}")
        return v

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) == 0:
            return None
        return v


class CouchWireSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    couchwire_timeout: Optional[float] = Field(None, alias="COUCHWIRE_TIMEOUT")
    couchwire_encoding: Optional[str] = Field(None, alias="COUCHWIRE_ENCODING")
    couchwire_user_agent: Optional[str] = Field(None, alias="COUCHWIRE_USER_AGENT")

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")
