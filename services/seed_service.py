"""
ReconHub seed service.
Builds the initial dataset from fixed reference lists with randomized order and ratings.
"""

import random
from typing import Iterable, List, Optional, Sequence, Tuple

from models import SOURCES, THREAT_LEVELS, QueryRecord, format_record_id
from store import DatasetStore

COMMON_IPS: Tuple[str, ...] = (
    "8.8.8.8", "8.8.4.4", "1.1.1.1", "9.9.9.9", "4.2.2.2", "208.67.222.222",
)

COMMON_DOMAINS: Tuple[str, ...] = (
    "google.com", "facebook.com", "github.com", "microsoft.com", "amazon.com",
    "apple.com", "stackoverflow.com", "wikipedia.org", "reddit.com", "linkedin.com",
    "cloudflare.com", "netflix.com",
)

COMMON_EMAILS: Tuple[str, ...] = (
    "support@google.com", "security@facebook.com", "noreply@github.com",
    "postmaster@amazon.com", "contact@apple.com", "webmaster@wikipedia.org",
    "support@paypal.com", "abuse@cloudflare.com", "help@linkedin.com", "info@microsoft.com",
)

# Seeded timestamps are spread across this month.
SEED_YEAR = 2025
SEED_MONTH = 10


def draw_threat(rng: random.Random) -> str:
    return rng.choice(THREAT_LEVELS)


def draw_source(rng: random.Random) -> str:
    return rng.choice(SOURCES)


def seed_timestamp(position: int) -> str:
    """Synthetic display timestamp for the record at a 0-based post-shuffle position."""
    day = (position % 28) + 1
    hour = position % 24
    minute = (position * 7) % 60
    return f"{SEED_YEAR:04d}-{SEED_MONTH:02d}-{day:02d} {hour:02d}:{minute:02d}"


def build_seed_records(
    ips: Iterable[str],
    domains: Iterable[str],
    emails: Iterable[str],
    rng: random.Random,
) -> List[QueryRecord]:
    typed: List[Tuple[str, str]] = (
        [("IP", v) for v in ips]
        + [("Domain", v) for v in domains]
        + [("Email", v) for v in emails]
    )
    # random.shuffle is Fisher-Yates: every permutation equally likely.
    rng.shuffle(typed)

    records = []
    for i, (kind, value) in enumerate(typed):
        records.append(
            QueryRecord(
                id=format_record_id(i + 1),
                type=kind,
                query=value,
                threat=draw_threat(rng),
                source=draw_source(rng),
                timestamp=seed_timestamp(i),
            )
        )
    return records


def seed_store(
    rng: Optional[random.Random] = None,
    *,
    ips: Sequence[str] = COMMON_IPS,
    domains: Sequence[str] = COMMON_DOMAINS,
    emails: Sequence[str] = COMMON_EMAILS,
) -> DatasetStore:
    """Create a populated store whose id counter continues at N+1."""
    rng = rng or random.Random()
    records = build_seed_records(ips, domains, emails, rng)
    return DatasetStore(records, next_id=len(records) + 1)
