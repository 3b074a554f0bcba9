"""Module entrypoint for ``python -m prcontext``."""

from prcontext.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
