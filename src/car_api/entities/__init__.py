"""Domain entities for internal representation.

These are pure dataclasses used internally by services and repositories.
They are NOT the API contract - use DTOs from the dto package for that.
"""

from .car import CarEntity

__all__ = ["CarEntity"]
