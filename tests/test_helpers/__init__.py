"""
Shared constants and payload builders for the tests.
"""
import json

# Test constants used throughout tests
TEST_L1_LCD = "https://lcd.l1.example.com"
TEST_L2_LCD = "https://lcd.l2.example.com"
TEST_L1_CHAIN_ID = "initiation-1"
TEST_L2_CHAIN_ID = "minitia-1"
TEST_L2_ID = 7
TEST_ADDRESS = "init1wlvk4e083pd3nddlfe5quy56e68atra3gu9xfs"
TEST_TX_HASH = "A1B2C3D4E5F60718293A4B5C6D7E8F90A1B2C3D4E5F60718293A4B5C6D7E8F90"


class FakeClock:
    """Monotonic clock that only advances when sleep is called"""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def tx_response(tx_hash: str = TEST_TX_HASH, height: int = 1234, code: int = 0) -> dict:
    """Build a tx_response payload as returned by the LCD"""
    return {
        "height": str(height),
        "txhash": tx_hash,
        "codespace": "",
        "code": code,
        "data": "",
        "raw_log": "[]",
        "logs": [],
        "info": "",
        "gas_wanted": "200000",
        "gas_used": "120345",
        "tx": None,
        "timestamp": "2024-01-01T00:00:00Z",
        "events": [],
    }


def move_resource_response(address: str, struct_tag: str, data: dict) -> dict:
    """Build a by_struct_tag resource payload as returned by the LCD"""
    return {
        "resource": {
            "address": address,
            "struct_tag": struct_tag,
            "move_resource": json.dumps({"type": struct_tag, "data": data}),
            "raw_bytes": "",
        }
    }
