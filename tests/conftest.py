"""Shared fixtures. Log output goes to a temporary directory for the whole session."""

import os
import tempfile
from datetime import date
from typing import Callable, Dict

import pytest

os.environ.setdefault("ITALIAN_IDS_LOG_DIR", tempfile.mkdtemp(prefix="italian-ids-logs-"))


class RecordingMCP:
    """Stand-in for FastMCP that keeps the registered tool functions by name."""

    def __init__(self) -> None:
        self.tools: Dict[str, Callable] = {}

    def tool(self):
        def decorator(fn: Callable) -> Callable:
            self.tools[fn.__name__] = fn
            return fn

        return decorator


@pytest.fixture
def recording_mcp() -> RecordingMCP:
    return RecordingMCP()


def years_ago(years: int) -> date:
    """Same month/day as today, ``years`` years back (28 Feb for a 29 Feb today)."""
    ref = date.today()
    try:
        return ref.replace(year=ref.year - years)
    except ValueError:
        return ref.replace(year=ref.year - years, day=28)
