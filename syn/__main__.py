"""Entry point for CLI.

Only for calling via `python -m syn`, prefer installed `syn` executable.
"""

from syn.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
