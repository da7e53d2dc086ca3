"""
ReconHub stats service.
Derived counts over a collection of query records.
"""

from typing import Dict, Iterable

from models import QueryRecord


def compute_stats(records: Iterable[QueryRecord]) -> Dict[str, int]:
    """Return total, high-risk and distinct-source counts.

    `highRisk` matches the canonical "High" label exactly; order of the input
    does not matter.
    """
    total = 0
    high_risk = 0
    sources = set()
    for r in records:
        total += 1
        if r.threat == "High":
            high_risk += 1
        sources.add(r.source)
    return {"total": total, "highRisk": high_risk, "uniqueSources": len(sources)}
