"""
Utility functions for the OPinit LCD client.
"""
import base64
import struct

U64_MAX = 2 ** 64 - 1


def get_l2_denom(l2_token: bytes) -> str:
    """
    Derive the L2 denom of a bridged token.

    Args:
        l2_token: Raw L2 token identifier

    Returns:
        Denom string in the form ``l2/<hex>``
    """
    return f"l2/{bytes(l2_token).hex()}"


def struct_tag_address(struct_tag: str) -> str:
    """
    Return the account address a struct tag is published under.

    Args:
        struct_tag: Fully qualified type tag, e.g. "0x1::native_uinit::Coin"

    Returns:
        The text before the first "::"
    """
    return struct_tag.split("::")[0]


def encode_u64(value: int) -> str:
    """
    BCS-encode a u64 view function argument as base64.

    Raises:
        ValueError: If the value does not fit in a u64
    """
    value = int(value)
    if value < 0 or value > U64_MAX:
        raise ValueError(f"Value out of u64 range: {value}")
    return base64.b64encode(struct.pack("<Q", value)).decode("ascii")
