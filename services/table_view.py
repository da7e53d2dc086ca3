"""
ReconHub database table view.
Row rendering, live filtering, and the stats block shown above the table.
"""

import threading
from typing import Dict, List, Optional, Sequence, Tuple

from models import RECORD_FIELDS, QueryRecord
from services.stats_service import compute_stats
from store import DatasetStore


def risk_badge(threat: str) -> Dict[str, str]:
    """Badge label and CSS class for a threat level ("Safe" gets no qualifier)."""
    label = threat if threat == "Safe" else f"{threat} Risk"
    return {"label": label, "css_class": f"tag-{threat.lower()}"}


def render_row(record: QueryRecord) -> Dict[str, object]:
    return {
        "id": record.id,
        "type": record.type,
        "query": record.query,
        "badge": risk_badge(record.threat),
        "source": record.source,
        "timestamp": record.timestamp,
    }


def render_rows(records: Sequence[QueryRecord]) -> List[Dict[str, object]]:
    return [render_row(r) for r in records]


def matches(record: QueryRecord, term: str) -> bool:
    needle = term.lower()
    return any(needle in str(getattr(record, f)).lower() for f in RECORD_FIELDS)


def live_filter(records: Sequence[QueryRecord], term: Optional[str]) -> List[QueryRecord]:
    """Records where any field contains `term`, case-insensitive, order kept."""
    if not term:
        return list(records)
    return [r for r in records if matches(r, term)]


class DatabaseView:
    """Table + stats state for the database page.

    `load` takes a full snapshot of the store and recomputes stats; `search`
    narrows the loaded snapshot and re-renders rows only.
    """

    def __init__(self, store: DatasetStore):
        self.store = store
        self.records: Tuple[QueryRecord, ...] = ()
        self.stats: Dict[str, int] = compute_stats(())
        self._full_rows: List[Dict[str, object]] = []
        self._loaded_version: Optional[int] = None
        self._lock = threading.RLock()

    def load(self) -> List[Dict[str, object]]:
        with self._lock:
            version, records = self.store.versioned_all()
            if self._loaded_version != version:
                self.records = records
                self.stats = compute_stats(records)
                self._full_rows = render_rows(records)
                self._loaded_version = version
            return list(self._full_rows)

    def search(self, term: Optional[str]) -> List[Dict[str, object]]:
        # NOTE: stats stay pinned to the last full load rather than the
        # filtered rows. A later revision may want live-filtered stats.
        if not term:
            return list(self._full_rows)
        return render_rows(live_filter(self.records, term))

    def snapshot(self, term: Optional[str] = None) -> Dict[str, object]:
        # Stats and rows come from the same load even with concurrent requests.
        with self._lock:
            self.load()
            return {"stats": dict(self.stats), "rows": self.search(term), "term": term or ""}
