"""Pydantic data models for license-finder."""

from license_finder.models.config import AdapterConfig, FinderConfig
from license_finder.models.package import License, Package

__all__ = [
    "AdapterConfig",
    "FinderConfig",
    "License",
    "Package",
]
