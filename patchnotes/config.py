"""
Configuration management for Patchnotes.

This module handles loading and accessing configuration values from config.yaml.
It provides a centralized way to manage settings such as the index page, the
document routes and the tag tables without changing code.
"""

import yaml
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging


class ConfigManager:
    """
    Manages configuration loading and access for Patchnotes.
    """

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        defaults = self._get_default_config()

        if not self.config_path.exists():
            logging.info(f"Configuration file not found: {self.config_path}, using defaults")
            self._config = defaults
            return

        with open(self.config_path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file {self.config_path} must contain a mapping")

        self._config = self._merge(defaults, loaded)
        logging.info(f"Configuration loaded from {self.config_path}")

    @classmethod
    def _merge(cls, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = cls._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "index": {
                "url": "https://worldofwarcraft.blizzard.com/en-us/search/blog?k=Update%20Notes",
                "link_selector": ".NewsBlog-link",
                "stop_after": "/23885941/"
            },
            "fetch": {
                "timeout": 60.0,
                "user_agent": "patchnotes/0.1"
            },
            "documents": {
                "container_selector": ".Blog .detail",
                "hotfix_marker": "/hotfixes-",
                "content_updates": [
                    {
                        "url_contains": "/23892227/",
                        "first_heading": "item3",
                        "version": "10.0.5",
                        "date": "2023-01-24"
                    }
                ]
            },
            "paths": {
                "archive_dir": "site",
                "log_file": None
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(levelname)s - %(message)s"
            },
            "tags": {}
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "index.url")
            default: Default value if key is not found

        Returns:
            The configuration value

        Examples:
            config.get("fetch.timeout")  # Returns 60.0
            config.get("documents.hotfix_marker")  # Returns "/hotfixes-"
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, key_path: str, value: Any) -> None:
        """
        Override a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value
            value: The new value
        """
        keys = key_path.split('.')
        section = self._config
        for key in keys[:-1]:
            section = section.setdefault(key, {})
        section[keys[-1]] = value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section) or {}

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    # Convenience properties for commonly used values

    @property
    def index_url(self) -> str:
        """Get the URL of the changelog index page."""
        return self.get("index.url")

    @property
    def link_selector(self) -> str:
        """Get the CSS selector of article links on the index page."""
        return self.get("index.link_selector", ".NewsBlog-link")

    @property
    def stop_after(self) -> Optional[str]:
        """Get the href marker of the last article to include."""
        return self.get("index.stop_after")

    @property
    def fetch_timeout(self) -> float:
        """Get the timeout in seconds for the whole batch of fetches."""
        return float(self.get("fetch.timeout", 60.0))

    @property
    def user_agent(self) -> str:
        """Get the User-Agent header sent with requests."""
        return self.get("fetch.user_agent", "patchnotes/0.1")

    @property
    def container_selector(self) -> str:
        """Get the CSS selector of the article detail container."""
        return self.get("documents.container_selector", ".Blog .detail")

    @property
    def hotfix_marker(self) -> str:
        """Get the URL substring identifying hotfix documents."""
        return self.get("documents.hotfix_marker", "/hotfixes-")

    @property
    def content_updates(self) -> List[Dict[str, Any]]:
        """
        Get the content-update routes with their dates parsed.

        Returns:
            List of route dictionaries (url_contains, first_heading, version, date)
        """
        routes = []
        for route in self.get("documents.content_updates", []) or []:
            route = dict(route)
            if not isinstance(route.get("date"), date):
                route["date"] = date.fromisoformat(str(route["date"]))
            routes.append(route)
        return routes

    @property
    def archive_directory(self) -> Optional[str]:
        """Get the directory of earlier change logs."""
        return self.get("paths.archive_dir", "site")

    @property
    def log_filename(self) -> Optional[str]:
        """Get the log file name, if logging to a file."""
        return self.get("paths.log_file")


def get_config(config_path: str = "config.yaml") -> ConfigManager:
    """
    Load a configuration instance.

    Returns:
        A ConfigManager for the given path
    """
    return ConfigManager(config_path)
