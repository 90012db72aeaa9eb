"""Module entrypoint for running contactinfo as ``python -m contactinfo``."""

from __future__ import annotations

from contactinfo.cli import main


if __name__ == "__main__":
    main()
