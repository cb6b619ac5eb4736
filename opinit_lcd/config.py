"""
Executor configuration.
"""
import os
from dataclasses import dataclass, field
from typing import Optional

from .client import LCDClient

REQUIRED_ENV = ("L1_LCD_URI", "L2_LCD_URI", "L2ID", "L1_CHAIN_ID", "L2_CHAIN_ID")


@dataclass
class ExecutorConfig:
    """Connection settings of a bridge executor."""

    l1_lcd_uri: str
    l2_lcd_uri: str
    # Bridge id of the L2 on L1
    l2_id: int
    l1_chain_id: str
    l2_chain_id: str

    lcd_timeout: int = 30
    lcd_retry_count: int = 3

    _l1_lcd: Optional[LCDClient] = field(default=None, init=False, repr=False, compare=False)
    _l2_lcd: Optional[LCDClient] = field(default=None, init=False, repr=False, compare=False)

    @property
    def l1_lcd(self) -> LCDClient:
        """LCD client of the L1 chain, created on first use."""
        if self._l1_lcd is None:
            self._l1_lcd = LCDClient(
                self.l1_lcd_uri,
                timeout=self.lcd_timeout,
                retry_count=self.lcd_retry_count
            )
        return self._l1_lcd

    @property
    def l2_lcd(self) -> LCDClient:
        """LCD client of the L2 chain, created on first use."""
        if self._l2_lcd is None:
            self._l2_lcd = LCDClient(
                self.l2_lcd_uri,
                timeout=self.lcd_timeout,
                retry_count=self.lcd_retry_count
            )
        return self._l2_lcd

    @classmethod
    def from_env(cls) -> "ExecutorConfig":
        """Create config from environment variables."""
        missing = [name for name in REQUIRED_ENV if not os.getenv(name)]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")

        return cls(
            l1_lcd_uri=os.environ["L1_LCD_URI"],
            l2_lcd_uri=os.environ["L2_LCD_URI"],
            l2_id=int(os.environ["L2ID"]),
            l1_chain_id=os.environ["L1_CHAIN_ID"],
            l2_chain_id=os.environ["L2_CHAIN_ID"],
            lcd_timeout=int(os.getenv("LCD_TIMEOUT", "30")),
            lcd_retry_count=int(os.getenv("LCD_RETRY_COUNT", "3")),
        )
