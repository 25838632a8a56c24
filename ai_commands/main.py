"""Console-script entry point for the ``ai`` command group."""

from __future__ import annotations

from .cli import dispatch_cli


def main() -> None:
    """Run the Click command group with the process arguments."""

    dispatch_cli()


if __name__ == "__main__":
    main()
