"""
Searcher settings.

Three configuration layers (highest priority first):
1. Environment variables SEARCHER_*
2. Settings file (~/.multicluster_searcher/settings.yaml or an explicit path)
3. Code defaults

All settings are strings; non-string YAML values are converted with str()
and null values keep the current value.

Example:
    from multicluster_searcher.common.config import settings

    print(settings.PLUGIN_FILE_NAME)  # searcher_plugin.py

    # export SEARCHER_PLUGIN_DIR=/opt/searcher/plugins
    settings.load()
    print(settings.PLUGIN_DIR)  # /opt/searcher/plugins
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import logging
import os
import yaml
from pathlib import Path


DEFAULT_SETTINGS_FILE = Path.home() / ".multicluster_searcher" / "settings.yaml"


@dataclass
class SearcherSettings:
    """
    Searcher settings.

    Attributes:
        PLUGIN_DIR: directory holding the searcher plugin; empty disables plugin lookup
        PLUGIN_FILE_NAME: plugin module file name inside PLUGIN_DIR
        PLUGIN_INIT_FUNC: function the plugin module exposes to build its searcher
        LOG_LEVEL: logging level name
        CLUSTER_CONFIG_FILE: YAML file with scheduler clusters used by the CLI
    """

    PLUGIN_DIR: str = ""
    PLUGIN_FILE_NAME: str = "searcher_plugin.py"
    PLUGIN_INIT_FUNC: str = "searcher_plugin_init"
    LOG_LEVEL: str = "INFO"
    CLUSTER_CONFIG_FILE: str = ""

    _config_file: Optional[str] = field(default=None, repr=False)

    def load(self, config_file: Optional[str] = None) -> "SearcherSettings":
        """
        Load settings from the YAML file, then apply environment overrides.

        Args:
            config_file: settings file path, defaults to
                        ~/.multicluster_searcher/settings.yaml

        Returns:
            self
        """
        self._load_from_file(config_file)
        self._load_from_env()
        return self

    def _load_from_file(self, config_file: Optional[str] = None) -> None:
        """Load settings from a YAML file."""
        config_path = Path(config_file) if config_file else DEFAULT_SETTINGS_FILE
        if not config_path.exists():
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}

            for key, value in config_data.items():
                if key.upper() in self._get_defaults() and value is not None:
                    setattr(self, key.upper(), str(value))
            self._config_file = str(config_path)
        except (OSError, yaml.YAMLError, AttributeError) as e:
            logger = logging.getLogger(__name__)
            logger.warning(f"Failed to load config file {config_path}: {e}")

    def _load_from_env(self) -> None:
        """Apply SEARCHER_* environment overrides."""
        env_prefix = "SEARCHER_"

        for key in self._get_defaults():
            env_value = os.environ.get(f"{env_prefix}{key}")
            if env_value is not None:
                setattr(self, key, env_value)

    def _get_defaults(self) -> Dict[str, Any]:
        """Return all default values."""
        return {
            "PLUGIN_DIR": "",
            "PLUGIN_FILE_NAME": "searcher_plugin.py",
            "PLUGIN_INIT_FUNC": "searcher_plugin_init",
            "LOG_LEVEL": "INFO",
            "CLUSTER_CONFIG_FILE": "",
        }

    def to_dict(self) -> Dict[str, Any]:
        """Export settings as a dict."""
        return {k: getattr(self, k) for k in self._get_defaults().keys()}


# Process-wide settings, loaded from file and environment on import.
settings = SearcherSettings()
settings.load()
