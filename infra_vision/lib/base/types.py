from typing import TypeVar

ConfigType = TypeVar("ConfigType")
"""A module's config dataclass"""

ExportsType = TypeVar("ExportsType")
"""A module's exports dataclass"""
