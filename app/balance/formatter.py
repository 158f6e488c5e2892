from __future__ import annotations

from typing import Any

from app.balance.errors import (
    BalanceReadFailedError,
    QueryError,
    TransportFailureError,
)
from app.balance.models import BalanceResult

_ADDRESS_SHAPE = "0x followed by 40 hexadecimal characters"

_HINTS = {
    BalanceReadFailedError.code: (
        "Make sure the contract is deployed on {network} and implements the "
        "ERC-20 interface (balanceOf, decimals, symbol, name)."
    ),
    "INVALID_CONTRACT_ADDRESS": f"A contract address looks like {_ADDRESS_SHAPE}.",
    "INVALID_WALLET_ADDRESS": f"A wallet address looks like {_ADDRESS_SHAPE}.",
    TransportFailureError.code: "The network may be busy. Please try again in a moment.",
    QueryError.code: "Please try again in a moment.",
}


def error_hint(error: QueryError, *, network_name: str) -> str:
    """
    Remediation hint for a query error. KeyError means a new error code was
    added without a hint.
    """
    return _HINTS[error.code].format(network=network_name)


def balance_payload(result: BalanceResult) -> dict[str, Any]:
    return {
        "tokenName": result.token.name,
        "tokenSymbol": result.token.symbol,
        "tokenDecimals": result.token.decimals,
        "balance": result.formatted_balance,
        "rawBalance": str(result.raw_balance),
        "nativeBalance": result.native_balance,
        "nativeBalanceWei": str(result.native_balance_wei),
        "contractAddress": result.contract_address,
        "walletAddress": result.wallet_address,
        "network": result.network.as_dict(),
        "explorerUrl": result.explorer_url,
    }


def render_balance_text(result: BalanceResult) -> str:
    token = result.token
    network = result.network
    lines = [
        "Token Balance Check Results",
        "",
        "Token Information:",
        f"- Name: {token.name}",
        f"- Symbol: {token.symbol}",
        f"- Decimals: {token.decimals}",
        "",
        f"Balance: {result.formatted_balance} {token.symbol}",
        f"Native Balance: {result.native_balance} {network.native_symbol}",
        "",
        f"Contract: {result.contract_address}",
        f"Wallet: {result.wallet_address}",
        f"Network: {network.name} (Chain ID: {network.chain_id})",
        "",
        f"View on explorer: {result.explorer_url}",
    ]
    return "\n".join(lines)


def render_error_text(error: QueryError, *, network_name: str) -> str:
    hint = error_hint(error, network_name=network_name)
    return f"Sorry, I couldn't check that balance: {error.message}.\n\nTip: {hint}"
