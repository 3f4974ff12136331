"""
Configuration read from environment variables.

The Lambda function is configured entirely through its environment.
Values are read when ``Settings`` is instantiated, so a container picks
them up on its first invocation.  ``TABLE_NAME`` has no default.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env(name: str, default: Optional[str] = None):
    return field(default_factory=lambda: os.getenv(name) or default)


@dataclass
class Settings:
    """Settings for the users Lambda function."""

    table_name: Optional[str] = _env("TABLE_NAME")
    aws_region: Optional[str] = _env("AWS_REGION")
    # Point at DynamoDB Local or another compatible endpoint.
    dynamodb_endpoint_url: Optional[str] = _env("DYNAMODB_ENDPOINT_URL")
    log_level: str = _env("LOG_LEVEL", "INFO")
