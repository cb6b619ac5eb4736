"""
Exceptions for the OPinit LCD client.
"""
from typing import Optional


class OPinitLCDError(Exception):
    """Base exception for all OPinit LCD client errors."""
    pass


class LCDError(OPinitLCDError):
    """Raised when an LCD request fails or returns unusable data."""
    pass


class LCDConnectionError(LCDError):
    """Raised when the LCD node cannot be reached."""
    pass


class LCDResponseError(LCDError):
    """Raised when the LCD node returns a non-2xx response."""

    def __init__(self, message: str, status_code: int, code: Optional[int] = None):
        self.status_code = status_code
        self.code = code
        super().__init__(message)


class BroadcastError(OPinitLCDError):
    """
    Raised when the node rejects a broadcast transaction.

    The message is the node's raw log, unchanged.
    """

    def __init__(
        self,
        raw_log: str,
        code: int,
        txhash: Optional[str] = None,
        codespace: Optional[str] = None
    ):
        self.raw_log = raw_log
        self.code = code
        self.txhash = txhash
        self.codespace = codespace
        super().__init__(raw_log)
