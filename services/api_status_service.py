"""
ReconHub API status simulator.
Randomly rates the health of the external lookup providers shown on the dashboard.
"""

import random
from typing import Dict, List, Optional, Sequence

MONITORED_APIS = (
    "Shodan",
    "VirusTotal",
    "IPinfo",
    "AbuseIPDB",
    "SecurityTrails",
    "Hunter.io",
    "GreyNoise",
    "WHOIS",
)

STATUS_ACTIVE = "Active"
STATUS_OFFLINE = "Offline"
STATUS_CHECKING = "Checking..."

CHECKING_THRESHOLD = 0.15
OFFLINE_THRESHOLD = 0.2


def status_for_draw(r: float) -> str:
    if r < CHECKING_THRESHOLD:
        return STATUS_CHECKING
    if r < OFFLINE_THRESHOLD:
        return STATUS_OFFLINE
    return STATUS_ACTIVE


def simulate_api_status(rng: Optional[random.Random] = None, names: Sequence[str] = MONITORED_APIS) -> List[Dict[str, str]]:
    rng = rng or random.Random()
    return [{"name": name, "status": status_for_draw(rng.random())} for name in names]
