#!/usr/bin/env python3
"""
Simple example of using the OPinit LCD client.
"""
import logging
import sys

from opinit_lcd import ExecutorConfig, fetch_bridge_config, get_coin_info, check_tx


def main():
    """
    Demonstrate basic read-only usage.

    This example shows how to:
    1. Load the executor config from the environment
    2. Fetch the bridge config from L1
    3. Read coin metadata for a bridged coin
    4. Wait for a transaction given on the command line
    """
    logging.basicConfig(level=logging.INFO)

    try:
        config = ExecutorConfig.from_env()
    except ValueError as e:
        print(f"ERROR: {e}")
        return

    bridge_config = fetch_bridge_config(config)
    print(f"Bridge {config.l2_id} config: {bridge_config.model_dump()}")

    coin = get_coin_info(config.l1_lcd, "0x1::native_uinit::Coin", b"uinit")
    print(f"{coin.symbol} ({coin.name}), {coin.decimals} decimals -> {coin.denom}")

    if len(sys.argv) > 1:
        tx_hash = sys.argv[1]
        tx_info = check_tx(config.l2_lcd, tx_hash, timeout=30)
        if tx_info is None:
            print(f"Transaction {tx_hash} not confirmed within 30s")
        else:
            print(f"Transaction {tx_hash} confirmed at height {tx_info.height}")


if __name__ == "__main__":
    main()
