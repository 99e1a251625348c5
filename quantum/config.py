"""
Configuration management for Quantum.

This module handles loading and accessing configuration values from config.yaml.
It provides a centralized way to manage workspace defaults, notification timing
and the content-generation backend without changing code.
"""

import yaml
from pathlib import Path
from typing import Any, Dict
import logging


class ConfigManager:
    """
    Manages configuration loading and access for Quantum.
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
        try:
            if not self.config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}

            logging.info(f"Configuration loaded from {self.config_path}")

        except (OSError, yaml.YAMLError) as e:
            logging.error(f"Failed to load configuration: {e}")
            # Fall back to default configuration
            self._config = self._get_default_config()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "workspace": {
                "name": "Quantum",
                "default_page_title": "Untitled",
                "default_page_icon": "📄"
            },
            "notifications": {
                "ttl_seconds": 5.0
            },
            "ai": {
                "ollama_host": "http://localhost:11434",
                "model": "gemma3",
                "timeout": 30.0,
                "api_key": None
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "file": None
            }
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "ai.model")
            default: Default value if key is not found

        Returns:
            The configuration value

        Examples:
            config.get("ai.model")  # Returns "gemma3"
            config.get("workspace.default_page_title")  # Returns "Untitled"
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    # Convenience properties for commonly used values

    @property
    def workspace_name(self) -> str:
        """Get the initial workspace name."""
        return self.get("workspace.name", "Quantum")

    @property
    def default_page_title(self) -> str:
        """Get the placeholder title given to new pages."""
        return self.get("workspace.default_page_title", "Untitled")

    @property
    def default_page_icon(self) -> str:
        """Get the icon given to new pages."""
        return self.get("workspace.default_page_icon", "📄")

    @property
    def notification_ttl(self) -> float:
        """Get how long a notification stays visible, in seconds."""
        return float(self.get("notifications.ttl_seconds", 5.0))

    @property
    def ollama_host(self) -> str:
        """Get Ollama host URL."""
        return self.get("ai.ollama_host", "http://localhost:11434")

    @property
    def model_name(self) -> str:
        """Get AI model name."""
        return self.get("ai.model", "gemma3")

    @property
    def ollama_timeout(self) -> float:
        """Get Ollama timeout."""
        return self.get("ai.timeout", 30.0)

    @property
    def api_key(self) -> Any:
        """Get the API key sent to the generation backend, if any."""
        return self.get("ai.api_key")

    @property
    def log_filename(self) -> Any:
        """Get log file name, or None to log to stdout only."""
        return self.get("logging.file")


# Global configuration instance
config = ConfigManager()
