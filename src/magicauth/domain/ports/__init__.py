"""Ports (interfaces) for the ports-and-adapters architecture."""

from magicauth.domain.ports.credential_repository import CredentialRepository

__all__ = ["CredentialRepository"]
