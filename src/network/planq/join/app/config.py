"""
Configuration Module for the Join Service

This module defines the configuration system for the deep-link service,
using Pydantic for settings validation and dependency injection through AppKeys.

The Settings class is loaded from environment variables with defaults suitable
for development. Handlers access settings and the resolver options built from
them through typed AppKeys.

Key configuration areas include:
- Service networking
- Native app URI scheme
- Public channel naming rules
- Display-name table location
- Error reporting
"""

import re
from typing import Final, Optional
import logging
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings
from aiohttp import web

from network.planq.join.resolve.charset import DEFAULT_CHANNEL_CHARS, ChannelRules
from network.planq.join.resolve.engine import DEFAULT_NATIVE_SCHEME, ResolveOptions
from network.planq.join.resolve.names import load_display_names


logger = logging.getLogger(__name__)

URI_SCHEME_PATTERN = re.compile(r"^[a-z][a-z0-9+.\-]*$")


class Settings(BaseSettings):
    """
    Application settings for the Join service.

    Environment variables are automatically mapped to settings fields. For
    example, the channel length limit is set with CHANNEL_MAX_LENGTH.
    """

    debug: bool = False
    """
    Enable debug mode for verbose logging.
    Set with DEBUG=true environment variable.
    """

    http_port: int = Field(alias="port", default=8080)
    """
    HTTP port for the service to listen on.
    Set with PORT environment variable.
    """

    native_scheme: str = DEFAULT_NATIVE_SCHEME
    """
    URI scheme of the native app, used to build deep links.
    Set with NATIVE_SCHEME environment variable.
    """

    display_names_file: Optional[str] = None
    """
    Path to a JSON object mapping identifiers to display names.
    The bundled table is used if not set.
    Set with DISPLAY_NAMES_FILE environment variable.
    """

    channel_min_length: int = 1
    """Minimum public channel name length"""

    channel_max_length: int = 64
    """Maximum public channel name length"""

    channel_allowed_chars: str = DEFAULT_CHANNEL_CHARS
    """Characters allowed in public channel names"""

    # Monitoring and error reporting
    sentry_dsn: Optional[str] = None
    """
    Sentry DSN for error reporting. Optional, no error reporting if not set.
    Set with SENTRY_DSN environment variable.
    """

    @field_validator("native_scheme", mode="after")
    @classmethod
    def check_native_scheme(cls, v: str) -> str:
        """
        Validate the native_scheme setting.

        The scheme is used verbatim in front of `://`, so it must be a bare
        lowercase URI scheme such as `status-im`.

        Raises:
            ValueError: If the value is not a valid URI scheme
        """
        if not URI_SCHEME_PATTERN.match(v):
            raise ValueError("native_scheme must be a lowercase URI scheme")
        return v

    @model_validator(mode="after")
    def check_channel_rules(self) -> "Settings":
        self.channel_rules()
        return self

    def channel_rules(self) -> ChannelRules:
        return ChannelRules(
            min_length=self.channel_min_length,
            max_length=self.channel_max_length,
            allowed_chars=self.channel_allowed_chars,
        )

    def resolve_options(self) -> ResolveOptions:
        """Build the resolver options, loading the display-name table."""
        return ResolveOptions(
            native_scheme=self.native_scheme,
            channel_rules=self.channel_rules(),
            display_names=load_display_names(self.display_names_file),
        )


# Application context keys for dependency injection
SettingsAppKey: Final = web.AppKey("settings", Settings)
"""AppKey for accessing the application settings"""

ResolveOptionsAppKey: Final = web.AppKey("resolve_options", ResolveOptions)
"""AppKey for accessing the shared, read-only resolver options"""
