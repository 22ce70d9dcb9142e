"""
File system access for ASIENTOS.

The core works on text already in memory; this module is the only place
that reads the entry directory and the optional chart and opening balance
files.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .chart import ChartOfAccounts, load_registry
from .config import AsientosConfig
from .journal import Journal, LoadFailure, load_journal
from .opening import InitialBalances, load_initial_balances

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_entry_dir(directory: PathLike) -> dict[str, bytes]:
    """
    Read every entry file of a directory.

    Hidden files and subdirectories are skipped. Content is returned
    undecoded; load_journal decodes each file on its own so that one
    file with bad bytes is reported without stopping the others.

    Args:
        directory: Directory holding one file per entry.

    Returns:
        Raw file content keyed by filename, in sorted filename order.

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
    """
    path = Path(directory)
    if not path.exists():
        raise FileNotFoundError(f"Entry directory not found: {path}")
    if not path.is_dir():
        raise NotADirectoryError(f"Not a directory: {path}")

    entries: dict[str, bytes] = {}
    for file_path in sorted(path.iterdir()):
        if file_path.name.startswith(".") or not file_path.is_file():
            logger.debug(f"Skipping {file_path.name}")
            continue
        entries[file_path.name] = file_path.read_bytes()

    logger.info(f"Read {len(entries)} entry file(s) from {path}")
    return entries


def read_optional_text(file_path: Optional[PathLike]) -> Optional[str]:
    """
    Read a UTF-8 text file, if a path was given.

    Args:
        file_path: Path, or None.

    Returns:
        The file content, or None when no path was given.

    Raises:
        FileNotFoundError: If a path was given but the file does not exist.
    """
    if file_path is None:
        return None
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    logger.debug(f"Reading {path}")
    return path.read_text(encoding="utf-8")


@dataclass
class Books:
    """Everything loaded for one run."""

    registry: ChartOfAccounts
    journal: Journal
    failures: list[LoadFailure]
    balances: InitialBalances


def load_books(
    entries_dir: PathLike,
    chart_file: Optional[PathLike] = None,
    opening_file: Optional[PathLike] = None,
    config: Optional[AsientosConfig] = None
) -> Books:
    """
    Read and load the chart, the opening balances and the entry directory.

    Args:
        entries_dir: Directory with one file per entry.
        chart_file: Optional chart override file.
        opening_file: Optional initial balance file.
        config: Optional configuration; uses default if not provided.

    Returns:
        Books.

    Raises:
        FileNotFoundError: If a given path does not exist.
        ChartDataError: If the built-in chart cannot be loaded.
    """
    if config is None:
        from .config import default_config
        config = default_config

    registry = load_registry(override_text=read_optional_text(chart_file))
    balances = load_initial_balances(read_optional_text(opening_file), config)
    journal, failures = load_journal(read_entry_dir(entries_dir), registry, config)

    return Books(registry=registry, journal=journal, failures=failures, balances=balances)
