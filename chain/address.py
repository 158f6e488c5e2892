from __future__ import annotations

import re

from web3 import Web3

# 0x + 40 hex digits; checksum casing is not verified.
ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_valid_address(value: object) -> bool:
    if not isinstance(value, str):
        return False
    return bool(ADDRESS_RE.match(value))


def to_checksum(address: str) -> str:
    """
    EIP-55 form of an already-validated address.

    web3 refuses non-checksummed mixed-case input, so everything sent to
    the RPC goes through here first.
    """
    return Web3.to_checksum_address(address.lower())
