"""YAML profile loader with integrity hashes.

Host applications use this at startup to populate a profile registry from a
directory of ``*.yaml`` files. The engine never reads files itself.
"""

import hashlib
import logging
from pathlib import Path
from typing import Any

import yaml

from criterion.core.config import settings
from criterion.errors import ProfileLoadError
from criterion.profiles.registry import InMemoryProfileRegistry, ProfileRegistry

logger = logging.getLogger(__name__)


def compute_profile_hash(content: str) -> str:
    """Compute SHA256 hash of profile file content.

    Args:
        content: Raw YAML content string

    Returns:
        SHA256 hex digest
    """
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def load_profile(path: Path) -> tuple[str, Any, str]:
    """Load one profile file.

    The profile id is the top-level ``id`` key when present (it is removed
    from the profile body), otherwise the file stem. A file may instead hold
    the profile under a ``profile`` key next to ``id``.

    Args:
        path: Path to a YAML file

    Returns:
        Tuple of (profile id, profile value, SHA256 hash)

    Raises:
        ProfileLoadError: If the file is missing or is not valid YAML
    """
    if not path.exists():
        raise ProfileLoadError(f"file not found: {path}")

    content = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ProfileLoadError(f"{path.name}: {e}") from e

    profile_id = path.stem
    profile: Any = data
    if isinstance(data, dict) and "id" in data:
        profile_id = str(data["id"])
        if "profile" in data:
            profile = data["profile"]
        else:
            profile = {k: v for k, v in data.items() if k != "id"}

    return profile_id, profile, compute_profile_hash(content)


class ProfileLoader:
    """Loads a directory of YAML profiles into a registry."""

    def __init__(self, profiles_dir: Path | None = None) -> None:
        """Initialize loader.

        Args:
            profiles_dir: Directory containing profiles; defaults to
                ``settings.profiles_dir``
        """
        profiles_dir = profiles_dir or settings.profiles_dir
        if profiles_dir is None:
            raise ProfileLoadError("no profiles directory configured")
        self.profiles_dir = Path(profiles_dir)
        self.hashes: dict[str, str] = {}

    def list_profiles(self) -> list[str]:
        """List available profile files, sorted by name."""
        files = list(self.profiles_dir.glob("*.yaml")) + list(self.profiles_dir.glob("*.yml"))
        return sorted(f.name for f in files)

    def load_into(self, registry: ProfileRegistry) -> list[str]:
        """Register every profile in the directory.

        Args:
            registry: Registry to populate

        Returns:
            Ids of the registered profiles, in file name order

        Raises:
            ProfileLoadError: On an unreadable file or a duplicate id
        """
        loaded: list[str] = []
        for filename in self.list_profiles():
            profile_id, profile, content_hash = load_profile(self.profiles_dir / filename)
            if profile_id in loaded:
                raise ProfileLoadError(f"duplicate profile id '{profile_id}' in {filename}")
            registry.register(profile_id, profile)
            self.hashes[profile_id] = content_hash
            loaded.append(profile_id)

        logger.info(f"Loaded {len(loaded)} profiles from {self.profiles_dir}")
        return loaded

    def get_profile_info(self, profile_id: str) -> dict[str, Any]:
        """Get audit metadata for a loaded profile."""
        return {
            "id": profile_id,
            "hash": self.hashes.get(profile_id),
            "profiles_dir": str(self.profiles_dir),
        }


def load_profiles(profiles_dir: Path | None = None) -> InMemoryProfileRegistry:
    """Build a new registry from a directory of YAML profiles."""
    registry = InMemoryProfileRegistry()
    ProfileLoader(profiles_dir).load_into(registry)
    return registry
