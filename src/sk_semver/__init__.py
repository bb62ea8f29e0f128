# SPDX-License-Identifier: MIT
"""Semantic version parsing with pluggable grammar policies.

This package parses SemVer 2.0.0 version strings into immutable values. A
grammar policy selects how strictly the string is read: ``STRICT`` requires
MAJOR.MINOR.PATCH, ``LOOSE`` accepts a leading "v" and fills in a missing
minor or patch with 0.

Example:
    >>> from sk_semver import Version, parse_version, is_valid_semver
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.7")
    >>> version.major
    1
    >>> [str(i) for i in version.prerelease]
    ['alpha', '1']
    >>>
    >>> Version.parse("v1.2", policy="loose").patch
    0
    >>>
    >>> is_valid_semver("1.2")
    False
"""

__version__ = "0.1.0"

from .config import (
    ConfigError,
    SemverConfig,
    find_project_root,
    load_config,
)
from .errors import (
    GrammarMismatch,
    InvalidBuildMetadata,
    InvalidPrerelease,
    InvalidPrereleaseIdentifier,
    InvalidVersion,
    MissingRequiredComponent,
    NumericConversionError,
    SemverError,
)
from .identifiers import (
    BuildMetadata,
    Prerelease,
    PrereleaseIdentifier,
)
from .numeric import (
    MAX_COMPONENT,
    convert_numeric,
)
from .policy import (
    LOOSE,
    POLICIES,
    STRICT,
    GrammarPolicy,
    LoosePolicy,
    StrictPolicy,
    resolve_policy,
)
from .version import (
    PARSE_ERROR_PREFIX,
    Version,
    is_valid_semver,
    parse_version,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "PARSE_ERROR_PREFIX",
    # Tags
    "Prerelease",
    "PrereleaseIdentifier",
    "BuildMetadata",
    # Numeric conversion
    "MAX_COMPONENT",
    "convert_numeric",
    # Policies
    "GrammarPolicy",
    "StrictPolicy",
    "LoosePolicy",
    "STRICT",
    "LOOSE",
    "POLICIES",
    "resolve_policy",
    # Errors
    "SemverError",
    "InvalidVersion",
    "GrammarMismatch",
    "MissingRequiredComponent",
    "NumericConversionError",
    "InvalidPrerelease",
    "InvalidPrereleaseIdentifier",
    "InvalidBuildMetadata",
    # Config
    "SemverConfig",
    "ConfigError",
    "find_project_root",
    "load_config",
]
