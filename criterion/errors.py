"""Error codes and exceptions raised by profile resolution and loading.

These exceptions never cross ``Engine.run``: the engine converts them into
``INVALID_INPUT`` results. They do surface from host-side tooling such as the
profile loader.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorCode:
    code: str
    message: str


PROFILE_001_REGISTRY_REQUIRED = ErrorCode(
    "PROFILE_001_REGISTRY_REQUIRED",
    "Profile ID provided but no registry supplied",
)
PROFILE_002_NOT_FOUND = ErrorCode(
    "PROFILE_002_NOT_FOUND",
    "Profile not found",
)
PROFILE_003_LOAD_FAILED = ErrorCode(
    "PROFILE_003_LOAD_FAILED",
    "Profile file could not be loaded",
)


class CriterionError(Exception):
    """Base class for criterion errors."""

    def __init__(self, err: ErrorCode, detail: str = "") -> None:
        self.err = err
        self.detail = detail
        super().__init__(self.describe())

    def describe(self) -> str:
        """Human-readable message used in result explanations."""
        if self.detail:
            return f"{self.err.message}: {self.detail}"
        return self.err.message


class ProfileResolutionError(CriterionError):
    """A profile reference could not be turned into a concrete profile."""


class RegistryRequiredError(ProfileResolutionError):
    def __init__(self, profile_id: str) -> None:
        self.profile_id = profile_id
        super().__init__(PROFILE_001_REGISTRY_REQUIRED)


class ProfileNotFoundError(ProfileResolutionError):
    def __init__(self, profile_id: str) -> None:
        self.profile_id = profile_id
        super().__init__(PROFILE_002_NOT_FOUND, profile_id)


class ProfileLoadError(CriterionError):
    def __init__(self, detail: str) -> None:
        super().__init__(PROFILE_003_LOAD_FAILED, detail)
