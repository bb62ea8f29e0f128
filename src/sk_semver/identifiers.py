# SPDX-License-Identifier: MIT
"""Prerelease and build metadata tags.

A prerelease tag is an ordered list of dot-separated identifiers, e.g.
"alpha.1" or "rc.2". Build metadata is an opaque informational tag, e.g.
"build.7" or "20240101". Both carry their own copy of the source text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .errors import InvalidBuildMetadata, InvalidPrerelease, InvalidPrereleaseIdentifier

# Characters allowed in a prerelease identifier or build metadata segment
_TOKEN_PATTERN = re.compile(r"[0-9A-Za-z-]+")

_SEPARATOR = "."


def _is_token(text: str) -> bool:
    return _TOKEN_PATTERN.fullmatch(text) is not None


@dataclass(frozen=True, slots=True, order=True)
class PrereleaseIdentifier:
    """One dot-separated identifier of a prerelease tag.

    Identifiers compare lexically by their text.
    """

    value: str

    @classmethod
    def parse(cls, text: str) -> "PrereleaseIdentifier":
        """Validate and wrap a single prerelease identifier.

        Any identifier longer than one character that starts with "0" is
        rejected, including alphanumeric ones such as "0a".

        Raises:
            InvalidPrereleaseIdentifier: If the identifier is empty, contains
                characters outside [0-9A-Za-z-], or has a leading zero
        """
        if not _is_token(text):
            raise InvalidPrereleaseIdentifier("empty prerelease part")

        if len(text) > 1 and text[0] == "0":
            raise InvalidPrereleaseIdentifier("leading zero in prerelease part")

        return cls(text)

    @property
    def is_numeric(self) -> bool:
        """Return True if the identifier consists of digits only."""
        return self.value.isdigit()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True, order=True)
class Prerelease:
    """A parsed prerelease tag.

    Attributes:
        identifiers: Identifiers in the order they appeared
        text: The original dot-joined tag
    """

    identifiers: tuple[PrereleaseIdentifier, ...]
    text: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.identifiers:
            raise InvalidPrerelease("prerelease must have at least one identifier")

    @classmethod
    def parse(cls, text: str) -> "Prerelease":
        """Parse a dot-separated prerelease tag.

        Args:
            text: Tag without the leading "-", e.g. "alpha.1"

        Returns:
            A Prerelease with identifiers in source order

        Raises:
            InvalidPrereleaseIdentifier: For the first invalid identifier,
                including empty ones produced by "", "a..b" or "a."

        Examples:
            >>> [str(i) for i in Prerelease.parse("alpha.1").identifiers]
            ['alpha', '1']
        """
        identifiers = tuple(
            PrereleaseIdentifier.parse(part) for part in text.split(_SEPARATOR)
        )
        return cls(identifiers, text)

    def __str__(self) -> str:
        return self.text or _SEPARATOR.join(i.value for i in self.identifiers)

    def __len__(self) -> int:
        return len(self.identifiers)

    def __iter__(self):
        return iter(self.identifiers)


@dataclass(frozen=True, slots=True)
class BuildMetadata:
    """Build metadata attached to a version. Carries no ordering."""

    value: str

    @classmethod
    def parse(cls, text: str) -> "BuildMetadata":
        """Validate a build metadata tag.

        Each dot-separated segment must be a non-empty run of [0-9A-Za-z-].
        Leading zeros are allowed.

        Raises:
            InvalidBuildMetadata: If any segment is empty or contains an
                illegal character
        """
        if not all(_is_token(part) for part in text.split(_SEPARATOR)):
            raise InvalidBuildMetadata("empty build metadata")
        return cls(text)

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self.value.split(_SEPARATOR))

    def __str__(self) -> str:
        return self.value
