"""Allow running keyecho with `python -m keyecho`."""

from keyecho.cli.main import cli

if __name__ == "__main__":
    cli()
