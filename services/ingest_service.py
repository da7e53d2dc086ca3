"""
ReconHub ingest service.
Validates lookup requests and prepends the resulting records to the dataset store.
"""

import logging
import random
from datetime import datetime, timezone
from typing import Callable, Optional

from models import QueryRecord, ValidationError, format_record_id
from services.seed_service import draw_source, draw_threat
from store import DatasetStore

logger = logging.getLogger("reconhub.ingest")

MISSING_FIELDS_ERROR = "Missing query or type"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_ingest_timestamp(moment: datetime) -> str:
    """Second precision, space separated, no zone suffix (UTC)."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M:%S")


class QueryIngest:
    """Single writer for the dataset store."""

    def __init__(
        self,
        store: DatasetStore,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.rng = rng or random.Random()
        self.clock = clock

    def ingest(self, kind, query) -> QueryRecord:
        # Any type string is accepted and only upper-cased; it is not
        # restricted to IP/Domain/Email.
        if not isinstance(kind, str) or not isinstance(query, str) or not kind or not query:
            logger.warning("Rejected query: type=%r q=%r", kind, query)
            raise ValidationError(MISSING_FIELDS_ERROR)

        threat = draw_threat(self.rng)
        source = draw_source(self.rng)
        timestamp = format_ingest_timestamp(self.clock())
        # Id allocation and prepend happen under one lock so concurrent
        # requests land at the front in id order.
        with self.store.lock:
            record = QueryRecord(
                id=format_record_id(self.store.allocate_id()),
                type=kind.upper(),
                query=query,
                threat=threat,
                source=source,
                timestamp=timestamp,
            )
            self.store.insert_front(record)
        logger.info("Ingested %s %s %s (%s via %s)", record.id, record.type, record.query, record.threat, record.source)
        return record
