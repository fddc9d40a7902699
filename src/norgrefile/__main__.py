"""Entry point for ``python -m norgrefile``."""

from norgrefile.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
