"""Tests for profile registries, resolution and YAML loading."""

from pathlib import Path

import pytest

from criterion.errors import (
    PROFILE_001_REGISTRY_REQUIRED,
    PROFILE_002_NOT_FOUND,
    ProfileLoadError,
    ProfileNotFoundError,
    ProfileResolutionError,
    RegistryRequiredError,
)
from criterion.profiles.loader import ProfileLoader, compute_profile_hash, load_profile, load_profiles
from criterion.profiles.registry import InMemoryProfileRegistry, create_profile_registry
from criterion.profiles.resolver import is_inline_profile, resolve_profile


class TestInMemoryProfileRegistry:
    """Tests for the dict-backed registry."""

    def test_register_get_has(self) -> None:
        registry = create_profile_registry()

        assert registry.has("us") is False
        assert registry.get("us") is None

        registry.register("us", {"min_age": 21})

        assert registry.has("us") is True
        assert registry.get("us") == {"min_age": 21}
        assert "us" in registry
        assert len(registry) == 1

    def test_register_overwrites(self) -> None:
        registry = InMemoryProfileRegistry({"us": {"min_age": 21}})
        registry.register("us", {"min_age": 18})

        assert registry.get("us") == {"min_age": 18}

    def test_ids_are_sorted(self) -> None:
        registry = create_profile_registry({"uk": {}, "eu": {}, "us": {}})

        assert registry.ids() == ["eu", "uk", "us"]

    def test_initial_profiles_are_copied(self) -> None:
        """Later changes to the source dict do not leak in."""
        source = {"us": {}}
        registry = InMemoryProfileRegistry(source)
        source["eu"] = {}

        assert registry.has("eu") is False


class TestResolveProfile:
    """Tests for profile reference resolution."""

    def test_inline_profile_returned_unchanged(self, registry) -> None:
        """Inline values skip the registry entirely."""
        profile = {"high_threshold": 1}

        resolved = resolve_profile(profile, registry)

        assert resolved.profile is profile
        assert resolved.profile_id is None

    def test_falsy_inline_profiles_are_inline(self) -> None:
        for profile in ({}, None, 0, []):
            assert is_inline_profile(profile) is True
            assert resolve_profile(profile).profile == profile

    def test_string_is_a_reference(self) -> None:
        assert is_inline_profile("us") is False

    def test_reference_without_registry(self) -> None:
        with pytest.raises(RegistryRequiredError) as exc_info:
            resolve_profile("us")

        assert exc_info.value.err == PROFILE_001_REGISTRY_REQUIRED
        assert exc_info.value.profile_id == "us"
        assert "no registry supplied" in str(exc_info.value)

    def test_unknown_reference(self, registry) -> None:
        with pytest.raises(ProfileNotFoundError) as exc_info:
            resolve_profile("ca", registry)

        assert exc_info.value.err == PROFILE_002_NOT_FOUND
        assert exc_info.value.describe() == "Profile not found: ca"
        assert isinstance(exc_info.value, ProfileResolutionError)

    def test_known_reference(self, registry) -> None:
        resolved = resolve_profile("eu", registry)

        assert resolved.profile == {"high_threshold": 8000, "medium_threshold": 3000}
        assert resolved.profile_id == "eu"

    def test_registered_none_profile_is_found(self) -> None:
        """Presence is decided by has(), not by the stored value."""
        registry = create_profile_registry({"empty": None})

        resolved = resolve_profile("empty", registry)

        assert resolved.profile is None
        assert resolved.profile_id == "empty"

    def test_resolution_does_not_mutate_registry(self, registry) -> None:
        before = {pid: registry.get(pid) for pid in registry.ids()}

        resolve_profile("us", registry)
        with pytest.raises(ProfileNotFoundError):
            resolve_profile("missing", registry)

        assert {pid: registry.get(pid) for pid in registry.ids()} == before


@pytest.fixture
def profiles_dir(tmp_path: Path) -> Path:
    """Directory with three profile files in different shapes."""
    (tmp_path / "us.yaml").write_text(
        "high_threshold: 10000\nmedium_threshold: 5000\n", encoding="utf-8"
    )
    (tmp_path / "europe.yaml").write_text(
        "id: eu\nhigh_threshold: 8000\nmedium_threshold: 3000\n", encoding="utf-8"
    )
    (tmp_path / "uk.yml").write_text(
        "id: uk\nprofile:\n  high_threshold: 9000\n  medium_threshold: 4000\n",
        encoding="utf-8",
    )
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    return tmp_path


class TestProfileLoader:
    """Tests for loading YAML profiles into a registry."""

    def test_load_profile_uses_file_stem(self, profiles_dir) -> None:
        profile_id, profile, content_hash = load_profile(profiles_dir / "us.yaml")

        assert profile_id == "us"
        assert profile == {"high_threshold": 10000, "medium_threshold": 5000}
        assert len(content_hash) == 64

    def test_load_profile_uses_id_key(self, profiles_dir) -> None:
        profile_id, profile, _ = load_profile(profiles_dir / "europe.yaml")

        assert profile_id == "eu"
        assert profile == {"high_threshold": 8000, "medium_threshold": 3000}

    def test_load_profile_with_profile_key(self, profiles_dir) -> None:
        profile_id, profile, _ = load_profile(profiles_dir / "uk.yml")

        assert profile_id == "uk"
        assert profile == {"high_threshold": 9000, "medium_threshold": 4000}

    def test_load_into_registry(self, profiles_dir) -> None:
        loader = ProfileLoader(profiles_dir)
        registry = create_profile_registry()

        loaded = loader.load_into(registry)

        assert loaded == ["eu", "uk", "us"]
        assert registry.ids() == ["eu", "uk", "us"]
        assert loader.get_profile_info("us")["hash"] == compute_profile_hash(
            (profiles_dir / "us.yaml").read_text(encoding="utf-8")
        )

    def test_list_profiles_ignores_other_files(self, profiles_dir) -> None:
        assert ProfileLoader(profiles_dir).list_profiles() == ["europe.yaml", "uk.yml", "us.yaml"]

    def test_load_profiles_builds_registry(self, profiles_dir) -> None:
        registry = load_profiles(profiles_dir)

        assert registry.get("eu") == {"high_threshold": 8000, "medium_threshold": 3000}

    def test_loaded_profiles_drive_evaluation(self, engine, risk_decision, profiles_dir) -> None:
        """Profiles loaded from disk resolve by id at run time."""
        registry = load_profiles(profiles_dir)

        result = engine.run(risk_decision, {"amount": 8500}, profile="uk", registry=registry)

        assert result.meta.profile_id == "uk"
        assert result.meta.matched_rule == "medium-risk"

    def test_duplicate_ids_rejected(self, tmp_path) -> None:
        (tmp_path / "a.yaml").write_text("id: same\nx: 1\n", encoding="utf-8")
        (tmp_path / "b.yaml").write_text("id: same\nx: 2\n", encoding="utf-8")

        with pytest.raises(ProfileLoadError, match="duplicate profile id 'same'"):
            load_profiles(tmp_path)

    def test_invalid_yaml_raises(self, tmp_path) -> None:
        (tmp_path / "broken.yaml").write_text("key: [unclosed\n", encoding="utf-8")

        with pytest.raises(ProfileLoadError):
            load_profile(tmp_path / "broken.yaml")

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(ProfileLoadError, match="file not found"):
            load_profile(tmp_path / "nope.yaml")

    def test_hash_is_deterministic(self) -> None:
        assert compute_profile_hash("a: 1") == compute_profile_hash("a: 1")
        assert compute_profile_hash("a: 1") != compute_profile_hash("a: 2")
