"""Helpers shared by the provider clients."""

import hashlib
import random
from datetime import date, timedelta


def seeded_rng(*parts) -> random.Random:
    """Deterministic RNG so mock data is stable for identical searches."""
    seed_str = "|".join("" if p is None else str(p) for p in parts)
    seed = int(hashlib.md5(seed_str.encode()).hexdigest()[:8], 16)
    return random.Random(seed)


def clean_params(params: dict) -> dict:
    """Drop empty values and encode lists/bools the way query strings expect."""
    cleaned = {}
    for key, value in params.items():
        if value is None or value == [] or value == "":
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            cleaned[key] = ",".join(str(v) for v in value)
        else:
            cleaned[key] = value
    return cleaned


def parse_date(value: str | date | None, default_days_ahead: int) -> date:
    """Parse an ISO date, or default to N days from today."""
    if isinstance(value, date):
        return value
    if value:
        return date.fromisoformat(value)
    return date.today() + timedelta(days=default_days_ahead)
