"""Profile registries, resolution and YAML loading."""

from criterion.profiles.loader import ProfileLoader, compute_profile_hash, load_profile, load_profiles
from criterion.profiles.registry import (
    InMemoryProfileRegistry,
    ProfileRegistry,
    create_profile_registry,
)
from criterion.profiles.resolver import ResolvedProfile, is_inline_profile, resolve_profile

__all__ = [
    "ProfileRegistry",
    "InMemoryProfileRegistry",
    "create_profile_registry",
    "ResolvedProfile",
    "is_inline_profile",
    "resolve_profile",
    "ProfileLoader",
    "compute_profile_hash",
    "load_profile",
    "load_profiles",
]
