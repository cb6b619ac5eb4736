"""
OPinit LCD client - transaction submission and chain queries for a bridge executor.
"""
from .version import __version__
from .client import LCDClient
from .config import ExecutorConfig
from .executor import transaction, check_tx, fetch_bridge_config, get_coin_info
from .models import TxInfo, BroadcastResult, MoveResource, AccountInfo, BridgeConfig, CoinInfo
from .wallet import Wallet, Signer
from .exceptions import (
    OPinitLCDError,
    LCDError,
    LCDConnectionError,
    LCDResponseError,
    BroadcastError,
)
from .utils import get_l2_denom

__all__ = [
    "__version__",
    "LCDClient",
    "ExecutorConfig",
    "transaction",
    "check_tx",
    "fetch_bridge_config",
    "get_coin_info",
    "TxInfo",
    "BroadcastResult",
    "MoveResource",
    "AccountInfo",
    "BridgeConfig",
    "CoinInfo",
    "Wallet",
    "Signer",
    "OPinitLCDError",
    "LCDError",
    "LCDConnectionError",
    "LCDResponseError",
    "BroadcastError",
    "get_l2_denom",
]
