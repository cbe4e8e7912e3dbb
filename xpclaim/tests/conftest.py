from __future__ import annotations

import logging
import secrets

import pytest

from xpclaim.config import get_settings
from xpclaim.logging import clear_context
from xpclaim.registry import MemoryNullifierRegistry
from xpclaim.service import NullifierService

from . import KAT_NONCE, KAT_TIMESTAMP


@pytest.fixture(autouse=True)
def _reset_logging_and_settings():
    """CLI runs reconfigure the xpclaim logger and cache settings; undo both."""
    yield
    root = logging.getLogger("xpclaim")
    for h in list(root.handlers):
        root.removeHandler(h)
    root.propagate = True
    root.setLevel(logging.NOTSET)
    clear_context()
    get_settings.cache_clear()


@pytest.fixture
def address() -> str:
    return "0x742d35Cc6634C0532925a3b844Bc9e7595ed6966"


@pytest.fixture
def player_secret() -> str:
    return secrets.token_hex(32)


@pytest.fixture
def fixed_service() -> NullifierService:
    return NullifierService(clock=lambda: KAT_TIMESTAMP, nonce_source=lambda: KAT_NONCE)


@pytest.fixture
def registry() -> MemoryNullifierRegistry:
    return MemoryNullifierRegistry()
