#!/usr/bin/env python3
"""Bump the serena-context-server version in pyproject.toml."""

import argparse
import re
import sys
from pathlib import Path

import semver

VERSION_PATTERN = re.compile(r'(\[project\][^\[]*?^version\s*=\s*)"([^"]+)"', re.DOTALL | re.MULTILINE)


def read_version(pyproject_path: Path) -> str:
    match = VERSION_PATTERN.search(pyproject_path.read_text())
    if not match:
        raise ValueError(f"Could not find [project].version in {pyproject_path}")
    return match.group(2)


def write_version(pyproject_path: Path, new_version: str) -> None:
    content = pyproject_path.read_text()
    pyproject_path.write_text(VERSION_PATTERN.sub(rf'\g<1>"{new_version}"', content, count=1))


def main() -> None:
    parser = argparse.ArgumentParser(description="Bump the serena-context-server version")
    parser.add_argument(
        "bump_type", choices=["patch", "minor", "major", "prerelease"], help="Type of version bump to perform"
    )
    parser.add_argument("--dry-run", action="store_true", help="Print the new version without writing it")
    parser.add_argument("--pyproject", type=Path, default=Path("pyproject.toml"))
    args = parser.parse_args()

    if not args.pyproject.exists():
        print(f"Error: Could not find {args.pyproject}", file=sys.stderr)
        sys.exit(1)

    current_version = read_version(args.pyproject)
    new_version = str(semver.Version.parse(current_version).next_version(args.bump_type))
    print(f"Bumping version from {current_version} to {new_version}")

    if args.dry_run:
        return

    write_version(args.pyproject, new_version)
    print(f"Updated {args.pyproject}")


if __name__ == "__main__":
    main()
