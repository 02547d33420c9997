"""Target framework identities."""

from .framework import ANY, FrameworkIdentity

__all__ = ["ANY", "FrameworkIdentity"]
