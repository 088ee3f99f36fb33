"""
Configuration Service

Loads the reference catalogs from YAML files.
Allows changing exercises, activities and supplements without code changes.

Usage:
    config = ConfigService.get()

    # Get the regular full-body exercise pool
    pool = ConfigService.get("exercises.regular.fullBody")

    # Reload catalogs without restart
    ConfigService.reload()
"""

import copy
import yaml
import logging
from typing import Any, Optional, Dict
from pathlib import Path
from functools import reduce

from core.config import settings
from core.exceptions import CatalogError

logger = logging.getLogger(__name__)

CATALOG_FILES = [
    "exercises.yaml",
    "rest_activities.yaml",
    "supplements.yaml",
]


class ConfigService:
    """
    Load and cache reference catalogs from YAML files.
    """

    _config: Optional[Dict[str, Any]] = None
    _default_dir: Path = Path(__file__).parent / "data"

    @classmethod
    def config_dir(cls) -> Path:
        """Catalog directory: PLAN_DATA_DIR when set, else the bundled data."""
        if settings.PLAN_DATA_DIR:
            return Path(settings.PLAN_DATA_DIR)
        return cls._default_dir

    @classmethod
    def get(cls, key: str = None, default: Any = None) -> Any:
        """
        Get configuration value.

        Args:
            key: Dot-separated key (e.g., "supplements.by_goal.strength")
            default: Default value if key not found

        Returns:
            Configuration value or entire config if no key provided
        """
        if cls._config is None:
            cls._load()

        if key is None:
            return cls._config

        try:
            keys = key.split(".")
            value = reduce(lambda d, k: d[k], keys, cls._config)
            return value
        except (KeyError, TypeError):
            return default

    @classmethod
    def snapshot(cls) -> Dict[str, Any]:
        """Deep copy of every loaded catalog."""
        return copy.deepcopy(cls.get())

    @classmethod
    def reload(cls):
        """Reload catalogs from files."""
        cls._config = None
        cls._load()
        logger.info("Catalogs reloaded")

    @classmethod
    def _load(cls):
        """
        Load all catalog files.

        Raises:
            CatalogError: a file is missing, unreadable or not a mapping
        """
        config: Dict[str, Any] = {}
        config_dir = cls.config_dir()

        for filename in CATALOG_FILES:
            filepath = config_dir / filename
            # Namespace by filename without extension
            namespace = filename.rsplit('.', 1)[0]
            if not filepath.exists():
                raise CatalogError(namespace, f"file not found: {filepath}")
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                raise CatalogError(namespace, f"could not read {filepath}: {e}") from e
            if not isinstance(data, dict):
                raise CatalogError(namespace, f"expected a mapping in {filepath}")
            config[namespace] = data
            logger.debug(f"Loaded catalog: {filename}")

        cls._config = config

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set a configuration value (in memory only).
        Useful for testing.
        """
        if cls._config is None:
            cls._load()

        keys = key.split(".")
        d = cls._config
        for k in keys[:-1]:
            if k not in d:
                d[k] = {}
            d = d[k]
        d[keys[-1]] = value

    @classmethod
    def reset(cls):
        """Drop cached catalogs; next access reloads from disk."""
        cls._config = None
