"""Allow running as ``python -m throttlerate``."""

from throttlerate.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
