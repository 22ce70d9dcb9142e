"""
Journal load report.

Summarizes a journal load: how many entries were accepted and, for every
rejected file, each violation found in it.
"""

import csv
import json
from collections import defaultdict
from io import StringIO

from ..journal import Journal, LoadFailure


def format_as_text(journal: Journal, failures: list[LoadFailure]) -> str:
    """
    Format the load result as human-readable text.

    Args:
        journal: Journal of accepted entries.
        failures: Rejected files in scan order.

    Returns:
        Formatted text report.
    """
    lines = []

    lines.append("=" * 80)
    lines.append("INFORME DE CARGA DEL LIBRO DIARIO")
    lines.append("=" * 80)
    lines.append("")

    lines.append("SUMMARY")
    lines.append("-" * 80)
    lines.append(f"Files scanned:      {len(journal) + len(failures)}")
    lines.append(f"Entries accepted:   {len(journal)}")
    lines.append(f"Files rejected:     {len(failures)}")
    lines.append("")

    if not failures:
        lines.append("[OK] Every entry parsed and validated")
        return "\n".join(lines) + "\n"

    by_kind = defaultdict(list)
    for failure in failures:
        by_kind[failure.kind].append(failure)

    for kind, group in sorted(by_kind.items()):
        lines.append(f"{kind.upper()} ({len(group)} file(s))")
        lines.append("-" * 80)
        for failure in group:
            lines.append(f"{failure.source}")
            for violation in failure.violations:
                lines.append(f"   {violation}")
        lines.append("")

    lines.append(f"[X] {len(failures)} file(s) need correcting")
    return "\n".join(lines) + "\n"


def format_as_csv(journal: Journal, failures: list[LoadFailure]) -> str:
    """
    Format the load result as CSV, one row per violation.

    Args:
        journal: Journal of accepted entries.
        failures: Rejected files in scan order.

    Returns:
        CSV string.
    """
    out = StringIO()
    writer = csv.writer(out)

    writer.writerow([
        "Source", "Entry Id", "Kind", "Category", "Severity", "Line",
        "Account", "Amount", "Message",
    ])
    for failure in failures:
        for violation in failure.violations:
            writer.writerow([
                failure.source,
                failure.entry_id or "",
                failure.kind,
                violation.category,
                violation.severity,
                violation.line_number or "",
                violation.account_code or "",
                "" if violation.amount is None else f"{violation.amount}",
                violation.message,
            ])

    return out.getvalue()


def format_as_json(journal: Journal, failures: list[LoadFailure]) -> str:
    """
    Format the load result as JSON.

    Args:
        journal: Journal of accepted entries.
        failures: Rejected files in scan order.

    Returns:
        JSON string.
    """
    data = {
        "load": {
            "accepted": [entry.id for entry in journal.iter_chronological()],
            "failures": [
                {
                    "source": failure.source,
                    "entry_id": failure.entry_id,
                    "kind": failure.kind,
                    "violations": [v.to_dict() for v in failure.violations],
                }
                for failure in failures
            ],
            "summary": {
                "accepted_count": len(journal),
                "failure_count": len(failures),
            },
        }
    }

    return json.dumps(data, indent=2, ensure_ascii=False)
