"""pwshort CLI bootstrap."""

from __future__ import annotations

from pwshort.cli import app

if __name__ == "__main__":
    app()
