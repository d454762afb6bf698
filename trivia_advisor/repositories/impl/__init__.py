"""Repositories implementation package."""

from .venue_repository import VenueRepository

__all__ = ["VenueRepository"]
