from datetime import UTC, datetime


def now() -> datetime:
    return datetime.now(UTC)


def short_id(value: str) -> str:
    """Truncate an identifier for log output."""
    return f"{value[:8]}..."
