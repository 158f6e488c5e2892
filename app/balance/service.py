from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Protocol, TypeVar

from app.balance.errors import BalanceReadFailedError, InvalidAddressError, TransportFailureError
from app.balance.models import (
    DEFAULT_DECIMALS,
    DEFAULT_NAME,
    DEFAULT_SYMBOL,
    BalanceResult,
    TokenInfo,
)
from app.core.context import submit_in_context
from chain.address import is_valid_address, to_checksum
from chain.networks import NetworkDescriptor
from chain.rpc import Erc20Reader, RPCTransportError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class TokenReader(Protocol):
    def balance_of(self, token_address: str, owner: str) -> int: ...

    def decimals(self, token_address: str) -> int: ...

    def symbol(self, token_address: str) -> str: ...

    def name(self, token_address: str) -> str: ...

    def native_balance(self, address: str) -> int: ...


def _read_or_default(label: str, read: Callable[[], T], default: T) -> T:
    try:
        return read()
    except Exception as e:
        logger.warning("token %s read failed, using default %r: %s", label, default, e)
        return default


class BalanceQueryService:
    """
    Reads an ERC-20 balance plus token metadata for one wallet.

    Only balanceOf and the native balance are mandatory. name, symbol and
    decimals fall back to fixed defaults when the contract does not answer.
    """

    def __init__(
        self,
        network: NetworkDescriptor,
        *,
        reader: TokenReader | None = None,
        timeout_s: float = 15.0,
    ) -> None:
        self.network = network
        self.reader: TokenReader = reader or Erc20Reader(network, timeout_s=timeout_s)

    def _read_decimals(self, token: str) -> int:
        decimals = int(self.reader.decimals(token))
        if not 0 <= decimals <= 255:
            raise ValueError(f"decimals out of uint8 range: {decimals}")
        return decimals

    def query_balance(self, contract_address: str, wallet_address: str) -> BalanceResult:
        if not is_valid_address(contract_address):
            raise InvalidAddressError("contract", contract_address)
        if not is_valid_address(wallet_address):
            raise InvalidAddressError("wallet", wallet_address)

        token = to_checksum(contract_address)
        wallet = to_checksum(wallet_address)
        logger.info(
            "balance query start chain_id=%s token=%s wallet=%s",
            self.network.chain_id,
            token,
            wallet,
        )

        with ThreadPoolExecutor(max_workers=5, thread_name_prefix="erc20-read") as pool:
            balance_f = submit_in_context(pool, self.reader.balance_of, token, wallet)
            native_f = submit_in_context(pool, self.reader.native_balance, wallet)
            decimals_f = submit_in_context(
                pool, _read_or_default, "decimals", lambda: self._read_decimals(token), DEFAULT_DECIMALS
            )
            symbol_f = submit_in_context(
                pool, _read_or_default, "symbol", lambda: str(self.reader.symbol(token)), DEFAULT_SYMBOL
            )
            name_f = submit_in_context(
                pool, _read_or_default, "name", lambda: str(self.reader.name(token)), DEFAULT_NAME
            )

            raw_balance = self._balance(balance_f, token)
            native_wei = self._native_balance(native_f, wallet)
            info = TokenInfo(
                name=name_f.result(),
                symbol=symbol_f.result(),
                decimals=decimals_f.result(),
            )

        result = BalanceResult(
            token=info,
            contract_address=token,
            wallet_address=wallet,
            raw_balance=raw_balance,
            native_balance_wei=native_wei,
            network=self.network,
        )
        logger.info(
            "balance query success token=%s symbol=%s balance=%s",
            token,
            info.symbol,
            result.formatted_balance,
        )
        return result

    def _balance(self, future: Future, token: str) -> int:
        try:
            return int(future.result())
        except RPCTransportError as e:
            logger.warning("balanceOf transport failure token=%s: %s", token, e)
            raise TransportFailureError() from e
        except Exception as e:
            logger.warning("balanceOf failed token=%s: %s", token, e)
            raise BalanceReadFailedError() from e

    def _native_balance(self, future: Future, wallet: str) -> int:
        try:
            return int(future.result())
        except Exception as e:
            logger.warning("native balance read failed wallet=%s: %s", wallet, e)
            raise TransportFailureError(f"Failed to read native balance: {e}") from e
