"""
Parser strategies for profile extraction.

Available parsers:
- ProfileParser: participant page → UserRecord
"""

from .base import ParserStrategy
from .profile import ProfileParser

__all__ = [
    "ParserStrategy",
    "ProfileParser",
]
