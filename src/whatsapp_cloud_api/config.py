"""
Pydantic models for YAML client configuration.
Provides schema validation with clear error messages for Graph API settings.
"""

from __future__ import annotations

import re
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

_GRAPH_VERSION_RE = re.compile(r"^v\d+\.\d+$")


class ClientConfig(BaseModel):
    """Settings for talking to the Graph API."""
    base_url: str = Field("https://graph.facebook.com", description="Graph API host")
    graph_version: str = Field("v17.0", description="Graph API version prefix")
    timeout_s: int = Field(60, ge=1, le=600, description="Request timeout in seconds")
    access_token: Optional[str] = Field(None, description="Default access token")

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        if not v.startswith(('http://', 'https://')):
            raise ValueError('base_url must be a valid HTTP/HTTPS URL')
        return v.rstrip('/')

    @field_validator('graph_version')
    @classmethod
    def validate_graph_version(cls, v):
        if not _GRAPH_VERSION_RE.match(v):
            raise ValueError('graph_version must look like "v17.0"')
        return v


def load_config(path: str) -> ClientConfig:
    """
    Load client settings from the `client` section of a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated ClientConfig.
    """
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    return ClientConfig(**(cfg.get("client") or {}))
