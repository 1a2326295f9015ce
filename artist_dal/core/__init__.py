"""
Core package for the artist data access layer.

This package provides the repository that the web layer calls.
"""

from .repository import ArtistRepository

__all__ = [
    "ArtistRepository",
]
