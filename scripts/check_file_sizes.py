#!/usr/bin/env python3
"""Fail the build when a vouch module or test file grows past its line cap.

Only code lines count; blank lines and comment-only lines are ignored.
``__init__.py`` files are skipped because they hold re-exports only.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

REPO_ROOT: Path = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class SizeCap:
    """Soft and hard code-line limits for every module under one directory."""

    label: str
    directory: Path
    soft: int
    hard: int


CAPS: tuple[SizeCap, ...] = (
    SizeCap("src", REPO_ROOT / "src" / "vouch", soft=250, hard=400),
    SizeCap("test", REPO_ROOT / "tests", soft=300, hard=500),
)


def code_lines(path: Path) -> int:
    """Return the number of non-blank, non-comment lines in *path*."""
    lines = (line.strip() for line in path.read_text(encoding="utf-8").splitlines())
    return sum(1 for line in lines if line and not line.startswith("#"))


def scan(cap: SizeCap) -> tuple[list[str], list[str]]:
    """Return ``(soft, hard)`` violation lines for one cap."""
    soft: list[str] = []
    hard: list[str] = []
    for module in sorted(cap.directory.rglob("*.py")):
        if module.name == "__init__.py":
            continue
        size = code_lines(module)
        where = module.relative_to(REPO_ROOT)
        if size > cap.hard:
            hard.append(f"{cap.label} {where}: {size} lines (hard cap {cap.hard})")
        elif size > cap.soft:
            soft.append(f"{cap.label} {where}: {size} lines (soft cap {cap.soft})")
    return soft, hard


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--strict", action="store_true", help="Treat soft-cap violations as failures")
    args = parser.parse_args(argv)

    soft: list[str] = []
    hard: list[str] = []
    for cap in CAPS:
        if cap.directory.is_dir():
            found_soft, found_hard = scan(cap)
            soft.extend(found_soft)
            hard.extend(found_hard)

    for line in soft:
        print(f"WARNING: {line}")
    for line in hard:
        print(f"ERROR:   {line}")

    if hard or (args.strict and soft):
        return 1
    if not soft:
        print("All modules within size caps.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
