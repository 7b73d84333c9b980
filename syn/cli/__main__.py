"""Entry point for CLI via `python -m syn.cli`."""

from syn.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
