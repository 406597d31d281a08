"""Module entrypoint for ``python -m gqlport``."""

from gqlport.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
