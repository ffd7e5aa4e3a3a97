"""Profile reference resolution."""

from dataclasses import dataclass
from typing import Any

from criterion.errors import ProfileNotFoundError, RegistryRequiredError
from criterion.profiles.registry import ProfileRegistry


@dataclass(frozen=True)
class ResolvedProfile:
    """A concrete profile and, when resolved by reference, its id."""

    profile: Any
    profile_id: str | None = None


def is_inline_profile(reference: Any) -> bool:
    """A string is a registry id; anything else is an inline profile."""
    return not isinstance(reference, str)


def resolve_profile(
    reference: Any,
    registry: ProfileRegistry | None = None,
) -> ResolvedProfile:
    """Resolve a profile reference to a concrete profile.

    Args:
        reference: Inline profile value or registry id
        registry: Registry consulted for string ids

    Returns:
        ResolvedProfile; ``profile_id`` is set only for registry lookups

    Raises:
        RegistryRequiredError: If an id is given without a registry
        ProfileNotFoundError: If the registry has no such id
    """
    if is_inline_profile(reference):
        return ResolvedProfile(profile=reference)

    if registry is None:
        raise RegistryRequiredError(reference)

    if not registry.has(reference):
        raise ProfileNotFoundError(reference)

    return ResolvedProfile(profile=registry.get(reference), profile_id=reference)
