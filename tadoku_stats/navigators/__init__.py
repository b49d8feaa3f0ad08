"""
Navigator strategies for participant discovery.

Available navigators:
- RosterNavigator: ranking listing → active participant ids
"""

from .base import ContestConfig, NavigatorStrategy
from .roster import RosterNavigator

__all__ = [
    "ContestConfig",
    "NavigatorStrategy",
    "RosterNavigator",
]
