"""
ReconHub data models.
Query records plus the closed vocabularies they draw from.
"""

from dataclasses import asdict, dataclass
from typing import Dict, Tuple

# Ordered lowest to highest.
THREAT_LEVELS: Tuple[str, ...] = ("Safe", "Low", "Medium", "High")

SOURCES: Tuple[str, ...] = (
    "Shodan",
    "VirusTotal",
    "AbuseIPDB",
    "WHOIS",
    "HaveIBeenPwned",
    "IPinfo",
)

RECORD_FIELDS: Tuple[str, ...] = ("id", "type", "query", "threat", "source", "timestamp")


class ValidationError(ValueError):
    """Raised when an ingest request is missing its type or query."""


def pad_id(n: int) -> str:
    return str(n).zfill(4)


def format_record_id(n: int) -> str:
    return f"#{pad_id(n)}"


@dataclass(frozen=True)
class QueryRecord:
    """One lookup entry in the dataset."""

    id: str
    type: str
    query: str
    threat: str
    source: str
    timestamp: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
