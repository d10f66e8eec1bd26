"""
Build script for obsidianhtml with optional mypyc compilation.

Usage:
    # Pure Python build (default)
    python -m build

    # Compiled with mypyc
    OBSIDIANHTML_USE_MYPYC=1 pip install .
"""

import os
import sys
from pathlib import Path

from setuptools import setup

USE_MYPYC = os.environ.get("OBSIDIANHTML_USE_MYPYC", "0") == "1"

# Note: node.py is excluded; Element/Text subclass a slotted base, which
# mypyc compiles differently from the interpreted subclasses in tests.
MYPYC_MODULES = [
    "src/obsidianhtml/walk.py",
    "src/obsidianhtml/predicates.py",
    "src/obsidianhtml/serialize.py",
]


def build_with_mypyc() -> list:
    """Build extension modules using mypyc."""
    try:
        from mypyc.build import mypycify
    except ImportError:
        print(
            "ERROR: mypyc is not installed. Install with: pip install mypy",
            file=sys.stderr,
        )
        print("Or install with mypyc support: pip install obsidianhtml[mypyc]", file=sys.stderr)
        sys.exit(1)

    for module_path in MYPYC_MODULES:
        if not Path(module_path).exists():
            print(f"ERROR: Module not found: {module_path}", file=sys.stderr)
            sys.exit(1)

    print(f"Compiling {len(MYPYC_MODULES)} modules with mypyc:")
    for module in MYPYC_MODULES:
        print(f"  - {module}")

    opt_level = os.environ.get("MYPYC_OPT_LEVEL", "3")
    return mypycify(MYPYC_MODULES, opt_level=opt_level, multi_file=False, separate=False)


if __name__ == "__main__":
    ext_modules = []

    if USE_MYPYC:
        ext_modules = build_with_mypyc()

    setup(
        ext_modules=ext_modules,
    )
