"""
Catalog module for the roster manager.

This module provides the static reference data characters are created from:
the races, the classes, and the abilities that belong to each class.
"""

from .content import CatalogService, load_default_catalog
from .models import Ability, CatalogEnum, ClassType, RaceType

__all__ = [
    # Import from content.py
    "CatalogService",
    "load_default_catalog",
    # Import from models.py
    "Ability",
    "CatalogEnum",
    "ClassType",
    "RaceType",
]
