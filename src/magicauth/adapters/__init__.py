"""Adapters layer - external system integrations."""

from magicauth.adapters.config import AppConfig
from magicauth.adapters.magicauth_api import Collection, MagicAuthHttpClient

__all__ = [
    "AppConfig",
    "Collection",
    "MagicAuthHttpClient",
]
