from datetime import datetime, timezone


# ISO 8601 UTC timestamps with millisecond precision and a trailing Z.
def get_utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso_utc(ts: str) -> datetime:
    """Parse ISO-8601 UTC timestamp (with trailing 'Z') to an aware datetime.

    Falls back to current UTC time if the input is falsy.
    """
    if not ts:
        return datetime.now(timezone.utc)
    if ts.endswith("Z"):
        ts = ts[:-1] + "+00:00"
    return datetime.fromisoformat(ts)


def seconds_since(ts: str) -> float:
    """Seconds elapsed since ``ts``; never negative."""
    return max(0.0, (datetime.now(timezone.utc) - parse_iso_utc(ts)).total_seconds())
