# Test configuration
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Give every test a fresh global rate limiter."""
    import src.ratelimit.limiter as limiter_module
    limiter_module._rate_limiter = None
    yield
    limiter_module._rate_limiter = None
