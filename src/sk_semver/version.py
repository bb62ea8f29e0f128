# SPDX-License-Identifier: MIT
"""Semantic version value type and parser.

Supports MAJOR.MINOR.PATCH format with optional prerelease and build metadata:
- Prerelease: -alpha, -alpha.1, -beta, -rc.1, -0.3.7
- Build metadata: +build, +build.7, +001

How much of that is required is decided by the grammar policy passed to
``Version.parse`` (strict by default).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .errors import GrammarMismatch, InvalidVersion, SemverError
from .identifiers import BuildMetadata, Prerelease
from .numeric import convert_numeric
from .policy import STRICT, GrammarPolicy, resolve_policy

PARSE_ERROR_PREFIX = "Failed to parse version string: "


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional prerelease tag, None when absent
        build: Optional build metadata, None when absent
        text: The string the version was parsed from; not part of equality
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[Prerelease] = None
    build: Optional[BuildMetadata] = None
    text: str = field(default="", compare=False, repr=False)

    @classmethod
    def parse(
        cls, text: str, policy: Union[GrammarPolicy, str] = STRICT
    ) -> "Version":
        """Parse a version string under the given grammar policy.

        Args:
            text: The version string
            policy: A GrammarPolicy or its name ("strict" or "loose")

        Returns:
            A new Version

        Raises:
            GrammarMismatch: If the string does not match the grammar
            MissingRequiredComponent: If the policy requires a component
                that is absent
            InvalidVersion: If a component fails conversion or validation;
                the message is prefixed with "Failed to parse version string: "

        Examples:
            >>> Version.parse("1.2.3-alpha.1+build.7").minor
            2
            >>> str(Version.parse("v1.2", policy="loose"))
            '1.2.0'
        """
        if not isinstance(text, str):
            raise InvalidVersion(
                str(text), f"Version must be a string, got {type(text).__name__}"
            )

        grammar = resolve_policy(policy)

        match = grammar.match(text)
        if match is None:
            raise GrammarMismatch(text)

        grammar.validate_schema(match)

        minor_text = match.group("minor")
        patch_text = match.group("patch")
        prerelease_text = match.group("prerelease")
        build_text = match.group("buildmetadata")

        try:
            major = convert_numeric(match.group("major"), "major")
            minor = convert_numeric(minor_text, "minor") if minor_text is not None else 0
            patch = convert_numeric(patch_text, "patch") if patch_text is not None else 0
            prerelease = Prerelease.parse(prerelease_text) if prerelease_text is not None else None
            build = BuildMetadata.parse(build_text) if build_text is not None else None
        except SemverError as e:
            raise InvalidVersion(text, PARSE_ERROR_PREFIX + e.message) from e

        return cls(major, minor, patch, prerelease, build, text)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.build is not None:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a prerelease version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without prerelease or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def source(self) -> str:
        """Return the parsed source text, or the canonical form if constructed directly."""
        return self.text or str(self)


def parse_version(
    version_string: str, policy: Union[GrammarPolicy, str] = STRICT
) -> Version:
    """Parse a semantic version string into a Version object.

    Shorthand for ``Version.parse``.
    """
    return Version.parse(version_string, policy)


def is_valid_semver(
    version_string: str, policy: Union[GrammarPolicy, str] = STRICT
) -> bool:
    """Check if a string is a valid semantic version under ``policy``.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("v1.0", policy="loose")
        True
    """
    try:
        Version.parse(version_string, policy)
    except InvalidVersion:
        return False
    return True
