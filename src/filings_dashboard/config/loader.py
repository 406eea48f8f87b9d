"""
Configuration Loader - YAML Files plus Named Profiles.

A dashboard configuration is one base YAML file, optionally overlaid by a
profile from ``<base_path>/config/profiles/<name>.yaml``. The overlay is
merged key by key, so a profile only lists what it changes:

    # config/profiles/compact.yaml
    pagination:
      page_size: 6

The merged mapping is validated by DashboardConfig.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from filings_dashboard.config.models import DashboardConfig

logger = logging.getLogger(__name__)

PROFILES_DIR = Path("config") / "profiles"


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Return base with overlay merged in; nested mappings merge recursively."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Reads dashboard configuration files and profiles."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory relative paths and profiles are resolved from
        """
        self._base_path = Path(base_path) if base_path else Path(".")

    @property
    def profiles_dir(self) -> Path:
        return self._base_path / PROFILES_DIR

    def available_profiles(self) -> List[str]:
        """Names of the profiles found under profiles_dir."""
        if not self.profiles_dir.is_dir():
            return []
        return sorted(p.stem for p in self.profiles_dir.glob("*.yaml"))

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> DashboardConfig:
        """
        Load a configuration file, optionally overlaid by a profile.

        Raises:
            FileNotFoundError: If the file or the profile doesn't exist
            pydantic.ValidationError: If the merged configuration is invalid
        """
        raw = self._read(self._resolve(config_path))
        if profile:
            raw = deep_merge(raw, self._read_profile(profile))
            logger.info(f"Applied configuration profile '{profile}'")
        return self.load_from_dict(raw)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> DashboardConfig:
        return DashboardConfig.model_validate(config_dict)

    def _resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self._base_path / path

    def _read_profile(self, profile: str) -> Dict[str, Any]:
        path = self.profiles_dir / f"{profile}.yaml"
        if not path.is_file():
            known = ", ".join(self.available_profiles()) or "none"
            raise FileNotFoundError(f"Profile not found: {profile} (available: {known})")
        return self._read(path)

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> DashboardConfig:
    """
    Load a dashboard configuration in one call.

    Args:
        config_path: YAML file, relative to base_path unless absolute
        profile: Optional profile name
        base_path: Repository root holding config/ (defaults to cwd)
    """
    return ConfigLoader(base_path=base_path).load(config_path, profile)
