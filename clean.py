#!/usr/bin/env python3
"""Remove build output and caches from a swiss-pairing checkout."""

import argparse
import shutil
import sys
from pathlib import Path
from typing import Iterator

PROJECT_ROOT = Path(__file__).resolve().parent

CACHE_DIRS = [".pytest_cache", ".mypy_cache", "build", "dist"]


def ensure_safe_root(root: Path) -> None:
    """Refuse to run anywhere but the swiss-pairing project root."""
    pyproject = root / "pyproject.toml"
    if not pyproject.exists() or 'name = "swiss-pairing"' not in pyproject.read_text(
        encoding="utf-8"
    ):
        print("Error: clean.py must be run from the swiss-pairing project root.")
        sys.exit(1)


def iter_targets(root: Path) -> Iterator[Path]:
    for name in CACHE_DIRS:
        path = root / name
        if path.exists():
            yield path
    yield from root.glob("src/*.egg-info")
    yield from root.rglob("__pycache__")


def remove_path(path: Path, dry_run: bool) -> None:
    if dry_run:
        print(f"Would remove: {path}")
        return
    try:
        if path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink(missing_ok=True)
        print(f"Removed: {path}")
    except OSError as e:
        print(f"Failed to remove {path}: {e}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--dry-run", action="store_true", help="List what would be removed"
    )
    args = parser.parse_args()

    ensure_safe_root(PROJECT_ROOT)

    # Materialise before deleting anything
    for path in list(iter_targets(PROJECT_ROOT)):
        if path.exists():
            remove_path(path, args.dry_run)


if __name__ == "__main__":
    main()
