from __future__ import annotations

from dataclasses import dataclass

from app.balance.units import format_ether, format_units
from chain.networks import NetworkDescriptor

DEFAULT_DECIMALS = 18
DEFAULT_SYMBOL = "UNKNOWN"
DEFAULT_NAME = "Unknown Token"


@dataclass(frozen=True)
class BalanceIntent:
    matched: bool
    contract_address: str | None = None
    wallet_address: str | None = None


NO_INTENT = BalanceIntent(matched=False)


@dataclass(frozen=True)
class TokenInfo:
    name: str = DEFAULT_NAME
    symbol: str = DEFAULT_SYMBOL
    decimals: int = DEFAULT_DECIMALS


@dataclass(frozen=True)
class BalanceResult:
    """
    One token balance lookup.

    raw_balance and native_balance_wei stay ints; the decimal strings are
    derived on access.
    """

    token: TokenInfo
    contract_address: str
    wallet_address: str
    raw_balance: int
    native_balance_wei: int
    network: NetworkDescriptor

    @property
    def formatted_balance(self) -> str:
        return format_units(self.raw_balance, self.token.decimals)

    @property
    def native_balance(self) -> str:
        return format_ether(self.native_balance_wei)

    @property
    def explorer_url(self) -> str:
        return self.network.address_url(self.wallet_address)
