"""Profile registry capability and an in-memory implementation."""

from typing import Any, Protocol


class ProfileRegistry(Protocol):
    """Host-owned store mapping profile ids to profiles.

    The engine only ever calls ``has`` and ``get``, at resolution time.
    """

    def get(self, profile_id: str) -> Any | None:
        ...

    def register(self, profile_id: str, profile: Any) -> None:
        ...

    def has(self, profile_id: str) -> bool:
        ...


class InMemoryProfileRegistry:
    """Dict-backed profile registry."""

    def __init__(self, profiles: dict[str, Any] | None = None) -> None:
        self._profiles: dict[str, Any] = dict(profiles or {})

    def get(self, profile_id: str) -> Any | None:
        return self._profiles.get(profile_id)

    def register(self, profile_id: str, profile: Any) -> None:
        self._profiles[profile_id] = profile

    def has(self, profile_id: str) -> bool:
        return profile_id in self._profiles

    def ids(self) -> list[str]:
        """Registered profile ids, sorted."""
        return sorted(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, profile_id: object) -> bool:
        return profile_id in self._profiles


def create_profile_registry(profiles: dict[str, Any] | None = None) -> InMemoryProfileRegistry:
    """Create an in-memory registry, optionally pre-populated."""
    return InMemoryProfileRegistry(profiles)
