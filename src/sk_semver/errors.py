# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing semantic versions."""

from __future__ import annotations


class SemverError(Exception):
    """Base class for all version parsing failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidVersion(SemverError):
    """Raised when a version string cannot be parsed."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        super().__init__(message or f"Invalid semantic version: {version}")


class GrammarMismatch(InvalidVersion):
    """Raised when the whole string does not match the policy grammar."""

    def __init__(self, version: str):
        super().__init__(version, "invalid version string")


class MissingRequiredComponent(InvalidVersion):
    """Raised when a component the policy requires was not present."""

    def __init__(self, version: str, component: str):
        self.component = component
        super().__init__(version, f"{component} version is required")


class NumericConversionError(SemverError):
    """Raised when a numeric component cannot be converted."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class InvalidPrerelease(SemverError):
    """Raised when a prerelease tag is invalid."""

    pass


class InvalidPrereleaseIdentifier(InvalidPrerelease):
    """Raised when a single prerelease identifier is invalid."""

    pass


class InvalidBuildMetadata(SemverError):
    """Raised when build metadata is invalid."""

    pass
