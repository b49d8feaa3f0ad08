"""
YAML configuration loader with validation.

Loads the contest definition from YAML files with:
- Environment variable substitution
- Required field checks
- Default values
"""

import os
import re
from pathlib import Path
from typing import Optional

import yaml
import structlog

from tadoku_stats.navigators.base import ContestConfig

logger = structlog.get_logger(__name__)


DEFAULT_CONFIG_FILE = "contest.yml"


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variables in text.

    Supports formats:
    - ${VAR_NAME} - required, warns and substitutes "" if missing
    - ${VAR_NAME:-default} - optional with default

    Args:
        text: Text with env var placeholders

    Returns:
        Text with substituted values
    """
    def replace(match):
        var_expr = match.group(1)
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)
        else:
            value = os.getenv(var_expr)
            if value is None:
                logger.warning("env_var_not_set", var=var_expr)
                return ""
            return value

    return re.sub(r"\$\{([^}]+)\}", replace, text)


class ConfigLoader:
    """
    Configuration loader for the contest website.
    """

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_dir: Directory containing config files
                       (defaults to package config directory)
        """
        if config_dir:
            self.config_dir = Path(config_dir)
        else:
            self.config_dir = Path(__file__).parent

    def load_file(self, filename: str) -> dict:
        """
        Load YAML config file.

        Args:
            filename: Config file name (relative to config_dir)

        Returns:
            Parsed config dict
        """
        filepath = self.config_dir / filename

        if not filepath.exists():
            raise FileNotFoundError(f"Config file not found: {filepath}")

        logger.info("loading_config", file=str(filepath))

        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()

        content = substitute_env_vars(content)
        config = yaml.safe_load(content)

        return config or {}

    def load_contest(self, filename: str = DEFAULT_CONFIG_FILE) -> ContestConfig:
        """
        Load the contest definition from YAML.

        Args:
            filename: Config file name

        Returns:
            ContestConfig

        Raises:
            ValueError: If required fields are missing or the user path is unusable
        """
        config = self.load_file(filename)
        return self._parse_contest(config.get("contest") or {})

    def _parse_contest(self, data: dict) -> ContestConfig:
        """
        Parse contest definition into ContestConfig.

        Raises:
            ValueError: If required fields missing
        """
        if not data.get("base_url"):
            raise ValueError("Missing required field: base_url")

        contest = ContestConfig.from_dict(data)

        if "{user_id}" not in contest.user_path:
            raise ValueError(f"user_path must contain {{user_id}}: {contest.user_path}")

        logger.info("contest_loaded", base_url=contest.base_url)
        return contest


def load_contest(config_path: Optional[str] = None) -> ContestConfig:
    """
    Convenience function to load the contest config.

    Args:
        config_path: Optional path to a contest YAML file

    Returns:
        ContestConfig
    """
    if config_path:
        loader = ConfigLoader(str(Path(config_path).parent))
        return loader.load_contest(Path(config_path).name)
    return ConfigLoader().load_contest()
