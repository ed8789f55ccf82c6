"""Entry point for ``python -m xgetopt``; runs the demo program."""

from __future__ import annotations

from xgetopt.cli.app import cli

if __name__ == "__main__":
    cli()
