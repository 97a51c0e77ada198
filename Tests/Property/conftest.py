"""
Pytest configuration for property-based tests.

Hypothesis rejects function-scoped fixtures on @given tests, so the config
isolation fixture is overridden here with a module-scoped version.
"""
import os

import pytest

from tabswitch import config as tabswitch_config


@pytest.fixture(scope="module", autouse=True)
def isolated_config(tmp_path_factory):
    """Point configuration at a module-wide temporary file."""
    config_path = tmp_path_factory.mktemp("config") / "config.toml"
    previous = os.environ.get(tabswitch_config.CONFIG_ENV_VAR)
    os.environ[tabswitch_config.CONFIG_ENV_VAR] = str(config_path)
    tabswitch_config.reset_config_cache()
    yield config_path
    if previous is None:
        os.environ.pop(tabswitch_config.CONFIG_ENV_VAR, None)
    else:
        os.environ[tabswitch_config.CONFIG_ENV_VAR] = previous
    tabswitch_config.reset_config_cache()
