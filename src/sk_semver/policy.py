# SPDX-License-Identifier: MIT
"""Grammar policies deciding how strictly a version string is read.

A policy supplies the pattern a whole version string must match and a schema
check deciding which of the matched components are mandatory:

- strict: MAJOR.MINOR.PATCH, all three required
- loose: optional leading "v", only MAJOR required, MINOR and PATCH default to 0

Both share the SemVer 2.0.0 prerelease and build metadata sub-grammars.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Optional, Union

from .errors import MissingRequiredComponent

logger = logging.getLogger(__name__)

_NUMBER = r"0|[1-9][0-9]*"
_PRERELEASE_IDENTIFIER = r"0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*"

_COMPONENTS = (
    rf"(?P<major>{_NUMBER})"
    rf"(?:\.(?P<minor>{_NUMBER}))?"
    rf"(?:\.(?P<patch>{_NUMBER}))?"
)

_SUFFIXES = (
    rf"(?:-(?P<prerelease>(?:{_PRERELEASE_IDENTIFIER})"
    rf"(?:\.(?:{_PRERELEASE_IDENTIFIER}))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

# Names of the numeric groups, in the order they are checked
COMPONENTS = ("major", "minor", "patch")


class GrammarPolicy:
    """Base class for grammar policies.

    Subclasses set ``name`` and ``pattern_source`` and list the components
    they require. The pattern is compiled on first use and shared afterwards.
    """

    name: str = ""
    pattern_source: str = ""
    required: tuple[str, ...] = ()

    def __init__(self) -> None:
        self._pattern: Optional[re.Pattern[str]] = None
        self._lock = threading.Lock()

    @property
    def pattern(self) -> re.Pattern[str]:
        """Return the compiled grammar, compiling it on first access."""
        if self._pattern is None:
            with self._lock:
                if self._pattern is None:
                    logger.debug("Compiling %s version grammar", self.name)
                    self._pattern = re.compile(self.pattern_source, re.ASCII)
        return self._pattern

    def match(self, text: str) -> Optional[re.Match[str]]:
        """Match the whole of ``text`` against the grammar."""
        return self.pattern.fullmatch(text)

    def validate_schema(self, match: re.Match[str]) -> None:
        """Check that every required component was matched.

        Raises:
            MissingRequiredComponent: Naming the first missing component,
                checked major, then minor, then patch
        """
        for component in COMPONENTS:
            if component in self.required and match.group(component) is None:
                raise MissingRequiredComponent(match.string, component)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StrictPolicy(GrammarPolicy):
    """MAJOR.MINOR.PATCH with all three components required."""

    name = "strict"
    pattern_source = _COMPONENTS + _SUFFIXES
    required = COMPONENTS


class LoosePolicy(GrammarPolicy):
    """Optional leading "v"; MINOR and PATCH may be omitted."""

    name = "loose"
    pattern_source = "v?" + _COMPONENTS + _SUFFIXES
    required = ("major",)


STRICT = StrictPolicy()
LOOSE = LoosePolicy()

POLICIES: dict[str, GrammarPolicy] = {
    STRICT.name: STRICT,
    LOOSE.name: LOOSE,
}


def resolve_policy(policy: Union[GrammarPolicy, str]) -> GrammarPolicy:
    """Return the policy object for a policy or its name.

    Raises:
        ValueError: If the name is not a known policy
    """
    if isinstance(policy, GrammarPolicy):
        return policy

    try:
        return POLICIES[policy.lower()]
    except (KeyError, AttributeError):
        known = ", ".join(sorted(POLICIES))
        raise ValueError(f"Unknown policy {policy!r} (expected one of: {known})") from None
