"""
Transaction submission and chain queries used by the bridge executor.
"""
import logging
import time
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from .client import LCDClient
from .config import ExecutorConfig
from .exceptions import BroadcastError, LCDError, LCDConnectionError, LCDResponseError
from .models import TxInfo, BridgeConfig, CoinInfo, CoinInfoResource
from .utils import get_l2_denom, struct_tag_address, encode_u64
from .wallet import Wallet

DEFAULT_TX_TIMEOUT = 60.0
POLL_INTERVAL = 1.0

logger = logging.getLogger(__name__)


def transaction(
    wallet: Wallet,
    msgs: Sequence[Any],
    account_number: Optional[int] = None,
    sequence: Optional[int] = None,
    timeout: float = DEFAULT_TX_TIMEOUT
) -> Optional[TxInfo]:
    """
    Sign, broadcast and wait for a transaction

    Args:
        wallet: Wallet used to sign and broadcast
        msgs: Messages to include in the transaction
        account_number: Account number override
        sequence: Sequence override
        timeout: Seconds to wait for confirmation

    Returns:
        TxInfo once the transaction is indexed, or None if it was not
        confirmed within the timeout

    Raises:
        BroadcastError: If the node rejects the transaction
    """
    signed_tx = wallet.create_and_sign_tx(msgs, account_number, sequence)
    result = wallet.lcd.broadcast(signed_tx)
    if result.code:
        logger.error(f"Broadcast rejected (code {result.code}): {result.raw_log}")
        raise BroadcastError(
            result.raw_log,
            code=result.code,
            txhash=result.txhash,
            codespace=result.codespace
        )

    logger.info(f"Transaction broadcast: {result.txhash}")
    return check_tx(wallet.lcd, result.txhash, timeout=timeout)


def check_tx(
    lcd: LCDClient,
    tx_hash: str,
    timeout: float = DEFAULT_TX_TIMEOUT,
    poll_interval: float = POLL_INTERVAL
) -> Optional[TxInfo]:
    """
    Poll the node until a transaction is indexed

    Polls at a fixed interval until the node returns the transaction or
    the timeout elapses. A timeout is not an error: None is returned.

    Args:
        lcd: LCD client to query
        tx_hash: Transaction hash
        timeout: Seconds to keep polling
        poll_interval: Seconds between polls

    Returns:
        TxInfo, or None if the transaction was not found in time
    """
    started_at = time.monotonic()

    while time.monotonic() - started_at < timeout:
        try:
            tx_info = lcd.tx_info(tx_hash)
        except LCDConnectionError as e:
            logger.warning(f"Polling {tx_hash} failed, retrying: {e}")
            tx_info = None
        except LCDResponseError as e:
            # Gateways answer 5xx while the node behind them is down
            if e.status_code < 500:
                raise
            logger.warning(f"Polling {tx_hash} failed, retrying: {e}")
            tx_info = None

        if tx_info is not None:
            logger.info(f"Transaction confirmed: {tx_hash} (height {tx_info.height})")
            return tx_info
        time.sleep(poll_interval)

    logger.warning(f"Transaction {tx_hash} not confirmed within {timeout}s")
    return None


def fetch_bridge_config(config: ExecutorConfig, lcd: Optional[LCDClient] = None) -> BridgeConfig:
    """
    Read the bridge config store from the L1 op_output module

    Args:
        config: Executor config supplying the bridge id
        lcd: L1 LCD client (defaults to config.l1_lcd)

    Returns:
        BridgeConfig of the bridge
    """
    lcd = lcd or config.l1_lcd
    data = lcd.view_function(
        "0x1",
        "op_output",
        "get_config_store",
        [],
        [encode_u64(config.l2_id)]
    )
    return BridgeConfig.model_validate(data)


def get_coin_info(lcd: LCDClient, struct_tag: str, l2_token: bytes) -> CoinInfo:
    """
    Read coin metadata and pair it with the token's L2 denom

    Args:
        lcd: LCD client of the chain the coin lives on
        struct_tag: Coin type tag, e.g. "0x1::native_uinit::Coin"
        l2_token: Raw L2 token identifier

    Returns:
        CoinInfo
    """
    address = struct_tag_address(struct_tag)
    resource = lcd.resource(address, f"0x1::coin::CoinInfo<{struct_tag}>")
    try:
        metadata = CoinInfoResource.model_validate(resource.data)
    except ValidationError as e:
        logger.error(f"Malformed CoinInfo resource for {struct_tag}: {resource.data}")
        raise LCDError(f"Invalid CoinInfo resource for {struct_tag}: {str(e)}") from e

    return CoinInfo(
        struct_tag=struct_tag,
        denom=get_l2_denom(l2_token),
        name=metadata.name,
        symbol=metadata.symbol,
        decimals=metadata.decimals,
    )
