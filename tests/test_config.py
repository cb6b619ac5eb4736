"""
Tests for the ExecutorConfig class.
"""
import pytest

from opinit_lcd import ExecutorConfig, LCDClient
from tests.test_helpers import TEST_L1_LCD, TEST_L2_LCD, TEST_L2_ID

ENV = {
    "L1_LCD_URI": TEST_L1_LCD,
    "L2_LCD_URI": TEST_L2_LCD,
    "L2ID": "7",
    "L1_CHAIN_ID": "initiation-1",
    "L2_CHAIN_ID": "minitia-1",
}


@pytest.fixture
def env(monkeypatch):
    for name in ("LCD_TIMEOUT", "LCD_RETRY_COUNT"):
        monkeypatch.delenv(name, raising=False)
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)
    return monkeypatch


class TestExecutorConfig:
    """Test ExecutorConfig class."""

    def test_from_env(self, env):
        config = ExecutorConfig.from_env()

        assert config.l1_lcd_uri == TEST_L1_LCD
        assert config.l2_lcd_uri == TEST_L2_LCD
        assert config.l2_id == TEST_L2_ID
        assert config.l1_chain_id == "initiation-1"
        assert config.l2_chain_id == "minitia-1"
        assert config.lcd_timeout == 30
        assert config.lcd_retry_count == 3

    def test_from_env_optional_overrides(self, env):
        env.setenv("LCD_TIMEOUT", "5")
        env.setenv("LCD_RETRY_COUNT", "0")

        config = ExecutorConfig.from_env()

        assert config.lcd_timeout == 5
        assert config.lcd_retry_count == 0

    def test_from_env_missing(self, env):
        env.delenv("L2ID")
        env.delenv("L1_LCD_URI")

        with pytest.raises(ValueError) as exc_info:
            ExecutorConfig.from_env()

        assert "L1_LCD_URI" in str(exc_info.value)
        assert "L2ID" in str(exc_info.value)

    def test_from_env_invalid_bridge_id(self, env):
        env.setenv("L2ID", "not-a-number")

        with pytest.raises(ValueError):
            ExecutorConfig.from_env()

    def test_lcd_clients_are_lazy_and_cached(self, config):
        assert config._l1_lcd is None

        l1 = config.l1_lcd
        assert isinstance(l1, LCDClient)
        assert l1.url == TEST_L1_LCD
        assert config.l1_lcd is l1

        assert config.l2_lcd.url == TEST_L2_LCD
        assert config.l2_lcd is not l1

    def test_lcd_client_settings(self):
        config = ExecutorConfig(
            l1_lcd_uri=TEST_L1_LCD,
            l2_lcd_uri=TEST_L2_LCD,
            l2_id=1,
            l1_chain_id="l1",
            l2_chain_id="l2",
            lcd_timeout=9,
        )
        assert config.l1_lcd.timeout == 9

    def test_equality_ignores_clients(self, config):
        other = ExecutorConfig(
            l1_lcd_uri=config.l1_lcd_uri,
            l2_lcd_uri=config.l2_lcd_uri,
            l2_id=config.l2_id,
            l1_chain_id=config.l1_chain_id,
            l2_chain_id=config.l2_chain_id,
        )
        _ = config.l1_lcd
        assert config == other

    def test_invalid_lcd_uri(self):
        config = ExecutorConfig(
            l1_lcd_uri="http://lcd.example.com",
            l2_lcd_uri=TEST_L2_LCD,
            l2_id=1,
            l1_chain_id="l1",
            l2_chain_id="l2",
        )
        with pytest.raises(ValueError, match="must use https"):
            _ = config.l1_lcd
