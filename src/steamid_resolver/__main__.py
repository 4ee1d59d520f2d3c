"""Allows `python -m steamid_resolver ...`."""

from __future__ import annotations

import sys

# Windows terminals default to cp1252; Rich output contains non-ASCII glyphs.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from steamid_resolver.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
