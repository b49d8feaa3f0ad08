"""
Configuration module for the contest website.

Provides:
- YAML config loading with validation
- Environment variable substitution
"""

from .loader import ConfigLoader, load_contest

__all__ = ["ConfigLoader", "load_contest"]
