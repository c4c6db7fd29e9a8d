"""Shared test data."""

from datetime import datetime, timezone

SAMPLE_SHA = "0123456789abcdef0123456789ABCDEF01234567"
SAMPLE_DATE = datetime(2024, 3, 15, 8, 30, 45, tzinfo=timezone.utc)
