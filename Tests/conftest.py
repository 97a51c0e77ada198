"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import sys
from pathlib import Path
from typing import List

import pytest
from loguru import logger

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tabswitch import config as tabswitch_config


# ========== Configuration Fixtures ==========

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point configuration at a per-test file so no test reads or writes ~/.config."""
    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv(tabswitch_config.CONFIG_ENV_VAR, str(config_path))
    monkeypatch.delenv("TABSWITCH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TABSWITCH_LOG_FILE", raising=False)
    tabswitch_config.reset_config_cache()
    yield config_path
    tabswitch_config.reset_config_cache()


@pytest.fixture
def write_config(isolated_config):
    """Write raw TOML to the isolated config file."""
    def _write(content: str) -> Path:
        isolated_config.parent.mkdir(parents=True, exist_ok=True)
        isolated_config.write_text(content, encoding="utf-8")
        tabswitch_config.reset_config_cache()
        return isolated_config
    return _write


# ========== Logging Fixtures ==========

@pytest.fixture
def log_messages():
    """Capture loguru records as 'LEVEL: message' strings."""
    messages: List[str] = []
    handler_id = logger.add(
        lambda message: messages.append(
            f"{message.record['level'].name}: {message.record['message']}"
        ),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
