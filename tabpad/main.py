from __future__ import annotations
import sys
from tabpad.app import run_app


def main() -> int:
    """Module entrypoint for `python -m tabpad.main` or `python -m tabpad`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
