"""Shared data models."""

from .base import M2PruneBaseModel


__all__ = ["M2PruneBaseModel"]
