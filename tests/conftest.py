import os

import pytest


# Pin tunables before config is imported so a local .env cannot change results
os.environ.setdefault("CRITICAL_THRESHOLD", "5")
os.environ.setdefault("DEFAULT_IDENTITY", "anonymous")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def birth():
    from datetime import date

    return date(1990, 1, 1)
