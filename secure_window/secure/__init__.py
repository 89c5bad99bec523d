"""Secure display mode."""

from .toggle import SecureDisplayToggle

__all__ = ["SecureDisplayToggle"]
