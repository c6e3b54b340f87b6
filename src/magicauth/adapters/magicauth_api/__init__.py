"""MagicAuth API adapters."""

from magicauth.adapters.magicauth_api.collection import Collection
from magicauth.adapters.magicauth_api.http_client import MagicAuthHttpClient, error_check

__all__ = ["Collection", "MagicAuthHttpClient", "error_check"]
