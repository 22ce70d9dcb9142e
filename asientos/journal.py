"""
Journal ("libro diario") for ASIENTOS.

Parses and validates every entry file independently, keeps the valid
entries ordered by id and collects a failure record for each file that
could not be loaded, so one bad file never hides the others.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional, Union

from .chart import ChartOfAccounts
from .config import AsientosConfig
from .entry import Entry, check_entry_id, decode_entry_text, parse_entry, parse_entry_id
from .errors import DuplicateEntryId, EntryNotFound, ParseError
from .validate import validate_entry
from .violations import DUPLICATE_ENTRY_ID, PARSE_ERROR, ValidationResult, Violation

logger = logging.getLogger(__name__)


@dataclass
class LoadFailure:
    """
    A file that did not make it into the journal.

    Attributes:
        source: Filename (or id when loaded by id).
        entry_id: Entry id, or None when it could not be derived.
        violations: Everything wrong with the file.
        entry: The parsed entry when parsing succeeded but validation did
               not, kept for diagnostics.
    """

    source: str
    entry_id: Optional[str]
    violations: list[Violation] = field(default_factory=list)
    entry: Optional[Entry] = None

    @property
    def kind(self) -> str:
        """"parse", "duplicate" or "invalid"."""
        categories = {v.category for v in self.violations}
        if PARSE_ERROR in categories:
            return "parse"
        if DUPLICATE_ENTRY_ID in categories:
            return "duplicate"
        return "invalid"

    def __str__(self) -> str:
        header = f"{self.source} [{self.kind}]"
        return "\n".join([header] + [f"  {v}" for v in self.violations])


def parse_error_violation(error: ParseError) -> Violation:
    return Violation(
        PARSE_ERROR,
        "error",
        error.reason,
        line_number=error.line_number or None,
    )


# (entry_id, parsed entry or None, violations)
_Outcome = tuple[Optional[str], Optional[Entry], Union[ValidationResult, ParseError]]


class Journal:
    """
    Ordered collection of valid entries keyed by id.

    Ids encode date and fixed-width daily ordinal, so lexicographic id
    order is chronological order.
    """

    def __init__(self, entries: Optional[list[Entry]] = None):
        self._entries: dict[str, Entry] = {}
        for entry in entries or []:
            self.append(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def __iter__(self) -> Iterator[Entry]:
        return self.iter_chronological()

    def append(self, entry: Entry) -> None:
        """
        Add a validated entry.

        Raises:
            DuplicateEntryId: If the id is already in the journal.
        """
        if entry.id in self._entries:
            raise DuplicateEntryId(entry.id)
        self._entries[entry.id] = entry

    def get(self, entry_id: str) -> Entry:
        """
        Find an entry by id.

        Raises:
            EntryNotFound: If no entry has this id.
        """
        try:
            return self._entries[entry_id]
        except KeyError:
            raise EntryNotFound(entry_id) from None

    def iter_chronological(self) -> Iterator[Entry]:
        """Iterate entries in ascending id order. Each call starts over."""
        for entry_id in sorted(self._entries):
            yield self._entries[entry_id]

    @classmethod
    def load_all(
        cls,
        entries: Mapping[str, str],
        registry: ChartOfAccounts,
        config: Optional[AsientosConfig] = None,
        workers: Optional[int] = None
    ) -> tuple["Journal", list[LoadFailure]]:
        """
        Parse and validate entries given by id.

        Args:
            entries: Raw entry text keyed by entry id. A malformed id is
                reported as a parse failure.
            registry: Chart of accounts for code validation.
            config: Optional configuration; uses default if not provided.
            workers: Thread count; overrides ``config.workers``.

        Returns:
            Tuple of (journal of valid entries, failures in scan order).
        """
        sources = {entry_id: (entry_id, text) for entry_id, text in entries.items()}
        return _load(sources, registry, config, workers, ids_from_names=False)


def load_journal(
    entry_texts: Mapping[str, Union[str, bytes]],
    registry: ChartOfAccounts,
    config: Optional[AsientosConfig] = None,
    workers: Optional[int] = None
) -> tuple[Journal, list[LoadFailure]]:
    """
    Parse and validate entry files keyed by filename.

    Files are scanned in sorted filename order; the id of each entry comes
    from its filename. When two files encode the same id, the later one in
    scan order is reported as a duplicate.

    Args:
        entry_texts: File content keyed by filename. Bytes are decoded as
            UTF-8 per file; a file that does not decode is a parse failure.
        registry: Chart of accounts for code validation.
        config: Optional configuration; uses default if not provided.
        workers: Thread count; overrides ``config.workers``.

    Returns:
        Tuple of (journal of valid entries, failures in scan order).
    """
    sources = {name: (name, text) for name, text in entry_texts.items()}
    return _load(sources, registry, config, workers, ids_from_names=True)


def _process(
    source: str,
    text: Union[str, bytes],
    registry: ChartOfAccounts,
    config: AsientosConfig,
    ids_from_names: bool
) -> _Outcome:
    """Parse and validate one file. Shares no mutable state with other calls."""
    entry_id = None
    try:
        entry_id = parse_entry_id(source) if ids_from_names else check_entry_id(source)
        if isinstance(text, bytes):
            text = decode_entry_text(text)
        entry = parse_entry(text, entry_id, config)
    except ParseError as e:
        return entry_id, None, e

    return entry_id, entry, validate_entry(entry, registry, config)


def _load(
    sources: Mapping[str, tuple[str, Union[str, bytes]]],
    registry: ChartOfAccounts,
    config: Optional[AsientosConfig],
    workers: Optional[int],
    ids_from_names: bool
) -> tuple[Journal, list[LoadFailure]]:
    if config is None:
        from .config import default_config
        config = default_config
    if workers is None:
        workers = config.workers

    scan_order = sorted(sources)
    logger.info(f"Loading {len(scan_order)} entry file(s)")

    def run(key: str) -> _Outcome:
        source, text = sources[key]
        return _process(source, text, registry, config, ids_from_names)

    if workers and workers > 1 and len(scan_order) > 1:
        logger.debug(f"Parsing entries with {workers} worker thread(s)")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(run, scan_order))
    else:
        outcomes = [run(key) for key in scan_order]

    journal = Journal()
    failures: list[LoadFailure] = []
    claimed: dict[str, str] = {}

    for key, (entry_id, entry, outcome) in zip(scan_order, outcomes):
        source = sources[key][0]

        if entry_id is not None:
            if entry_id in claimed:
                logger.warning(
                    f"Duplicate entry id {entry_id} in '{source}' "
                    f"(already loaded from '{claimed[entry_id]}')"
                )
                failures.append(LoadFailure(
                    source=source,
                    entry_id=entry_id,
                    violations=[Violation(
                        DUPLICATE_ENTRY_ID,
                        "error",
                        f"Entry id '{entry_id}' already used by '{claimed[entry_id]}'",
                    )],
                    entry=entry,
                ))
                continue
            claimed[entry_id] = source

        if isinstance(outcome, ParseError):
            logger.warning(f"Cannot parse '{source}': {outcome}")
            failures.append(LoadFailure(
                source=source,
                entry_id=entry_id,
                violations=[parse_error_violation(outcome)],
            ))
            continue

        if not outcome.is_valid:
            outcome.log_summary(label=f"Entry '{source}'")
            failures.append(LoadFailure(
                source=source,
                entry_id=entry_id,
                violations=list(outcome.violations),
                entry=entry,
            ))
            continue

        journal.append(entry)

    logger.info(f"Journal loaded: {len(journal)} entry(ies), {len(failures)} failure(s)")
    return journal, failures
