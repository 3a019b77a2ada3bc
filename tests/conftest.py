import os
from datetime import date

import pytest

# moodiary.config refuses to import without a token
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "123456:test-token")
os.environ.pop("OPENWEATHER_API_KEY", None)


@pytest.fixture
def today() -> date:
    return date(2024, 3, 15)
