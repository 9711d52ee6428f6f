# Test configuration
import os
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

# Deterministic configuration: identity set, no real AI credentials
os.environ["OFFICIAL_EMAIL"] = "tester@example.com"
os.environ["AI_PROVIDER"] = "gemini"
os.environ["OPENAI_API_KEY"] = ""
os.environ["GEMINI_API_KEY"] = ""
os.environ["RATE_LIMIT_TRUST_FORWARDED"] = "false"


@pytest.fixture(autouse=True)
def fresh_settings_and_limiter():
    """Give every test freshly read settings and an empty rate limiter table."""
    from src.config import get_settings
    from src.ratelimit import reset_rate_limiter

    get_settings.cache_clear()
    reset_rate_limiter()
    yield
    get_settings.cache_clear()
    reset_rate_limiter()
