"""
Shared Click option decorators for asientos commands.

Each decorator factory wraps a single Click option so it can be reused
across multiple commands without repeating the option definition.
"""

from pathlib import Path

import click


def entries_option(func):
    """--entries/-e: required directory holding one file per entry."""
    return click.option(
        "--entries",
        "-e",
        "entries_dir",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        required=True,
        help="Directory with one file per journal entry (YYYYMMDD + ordinal).",
    )(func)


def chart_option(func):
    """--chart/-c: optional chart of accounts override file."""
    return click.option(
        "--chart",
        "-c",
        "chart_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Chart file with '<code> <name>' lines added to the built-in PGC.",
    )(func)


def opening_option(func):
    """--opening/-o: optional initial balance file."""
    return click.option(
        "--opening",
        "-o",
        "opening_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Initial balance file with '<code> <amount>' lines.",
    )(func)


def format_option(choices: tuple = ("text", "json", "csv")):
    """--format: output format selector."""
    def decorator(func):
        return click.option(
            "--format",
            type=click.Choice(list(choices), case_sensitive=False),
            default=choices[0],
            help=f"Output format (default: {choices[0]}).",
        )(func)
    return decorator


def workers_option(func):
    """--workers/-w: thread count for loading entries."""
    return click.option(
        "--workers",
        "-w",
        type=click.IntRange(min=1),
        default=None,
        help="Worker threads used to parse entry files (default: sequential).",
    )(func)
