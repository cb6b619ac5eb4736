"""
Pytest fixtures for the OPinit LCD client tests.
"""
import time
import pytest
from unittest.mock import MagicMock

from opinit_lcd import executor
from opinit_lcd.client import LCDClient
from opinit_lcd.config import ExecutorConfig
from opinit_lcd.wallet import Wallet
from tests.test_helpers import (
    FakeClock, TEST_L1_LCD, TEST_L2_LCD, TEST_L1_CHAIN_ID, TEST_L2_CHAIN_ID,
    TEST_L2_ID, TEST_ADDRESS
)


# Make time.sleep instantaneous so nothing in the suite waits on the wall clock
@pytest.fixture(autouse=True)
def _fast_sleep(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda *_a, **_kw: None)


@pytest.fixture
def fake_clock(monkeypatch):
    """Replace the clock used by the confirmation poller"""
    clock = FakeClock()
    monkeypatch.setattr(executor, "time", clock)
    return clock


@pytest.fixture
def lcd():
    return LCDClient(TEST_L1_LCD)


@pytest.fixture
def mock_lcd():
    """LCD client mock with no transaction indexed"""
    client = MagicMock(spec=LCDClient)
    client.tx_info.return_value = None
    return client


@pytest.fixture
def mock_signer():
    signer = MagicMock()
    signer.address = TEST_ADDRESS
    signer.sign_tx.return_value = b"signed-tx-bytes"
    return signer


@pytest.fixture
def wallet(mock_lcd, mock_signer):
    return Wallet(mock_lcd, mock_signer, TEST_L2_CHAIN_ID)


@pytest.fixture
def config():
    return ExecutorConfig(
        l1_lcd_uri=TEST_L1_LCD,
        l2_lcd_uri=TEST_L2_LCD,
        l2_id=TEST_L2_ID,
        l1_chain_id=TEST_L1_CHAIN_ID,
        l2_chain_id=TEST_L2_CHAIN_ID,
    )
