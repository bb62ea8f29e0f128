# SPDX-License-Identifier: MIT
"""CLI entry point for the sk-semver command."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import click

from .config import ConfigError, SemverConfig, load_config
from .errors import InvalidVersion
from .policy import POLICIES, GrammarPolicy
from .version import Version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[SemverConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> SemverConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def grammar(self, policy: Optional[str]) -> GrammarPolicy:
        """Return the policy named on the command line, else the configured one."""
        if policy is not None:
            return POLICIES[policy]
        return self.load_config().grammar


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


policy_option = click.option(
    "-p",
    "--policy",
    type=click.Choice(sorted(POLICIES), case_sensitive=False),
    default=None,
    help="Grammar policy (defaults to [tool.sk-semver] policy, else strict).",
)


def _version_to_dict(version: Version) -> dict[str, Any]:
    return {
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": (
            [str(i) for i in version.prerelease] if version.prerelease is not None else None
        ),
        "build": str(version.build) if version.build is not None else None,
        "normalized": str(version),
    }


@click.group()
@click.version_option(package_name="sk-semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version parsing tool.

    \b
    Examples:
        sk-semver parse 1.2.3-alpha.1+build.7
        sk-semver parse --policy loose v1.2 --json
        sk-semver validate 1.0.0 2.0.0-rc.1
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@cli.command()
@click.argument("version")
@policy_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@pass_context
def parse(ctx: Context, version: str, policy: Optional[str], as_json: bool) -> None:
    """Parse VERSION and print its components."""
    grammar = ctx.grammar(policy)

    try:
        parsed = Version.parse(version, grammar)
    except InvalidVersion as e:
        echo_error(str(e))
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(_version_to_dict(parsed), indent=2))
        return

    data = _version_to_dict(parsed)
    echo_info(f"major:      {data['major']}")
    echo_info(f"minor:      {data['minor']}")
    echo_info(f"patch:      {data['patch']}")
    if data["prerelease"] is not None:
        echo_info(f"prerelease: {'.'.join(data['prerelease'])}")
    if data["build"] is not None:
        echo_info(f"build:      {data['build']}")
    echo_info(f"normalized: {data['normalized']}")


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@policy_option
@pass_context
def validate(ctx: Context, versions: tuple[str, ...], policy: Optional[str]) -> None:
    """Check that every VERSION is valid.

    Exits with status 1 if any version is invalid.
    """
    config = ctx.load_config()
    grammar = ctx.grammar(policy)
    failures = 0

    for version in versions:
        try:
            parsed = Version.parse(version, grammar)
        except InvalidVersion as e:
            echo_error(f"{version}: {e}")
            failures += 1
            continue

        if parsed.is_prerelease and not config.allow_prerelease:
            echo_error(f"{version}: prerelease versions are not allowed")
            failures += 1
            continue

        echo_success(f"{version}: valid")

    if failures:
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
