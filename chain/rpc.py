from __future__ import annotations

from functools import lru_cache
from typing import Callable, TypeVar

import requests
from web3 import Web3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError

from chain.abis import ERC20_ABI
from chain.networks import NetworkDescriptor

T = TypeVar("T")


class Web3RPCError(RuntimeError):
    pass


class ContractReadError(Web3RPCError):
    """The node answered but the contract call reverted or returned garbage."""


class RPCTransportError(Web3RPCError):
    """The node could not be reached (timeout, refused, DNS...)."""


@lru_cache
def _get_web3(rpc_url: str, timeout_s: float) -> Web3:
    """
    Lazily create and cache a Web3 instance per RPC URL.

    The provider keeps a pooled requests session, so reusing the instance
    across requests reuses connections.
    """
    return Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout_s}))


def _guarded(label: str, fn: Callable[[], T]) -> T:
    try:
        return fn()
    except (ContractLogicError, BadFunctionCallOutput) as e:
        raise ContractReadError(f"{label} reverted: {e}") from e
    except (requests.exceptions.RequestException, OSError) as e:
        raise RPCTransportError(f"{label} unreachable: {e}") from e
    except Exception as e:
        raise Web3RPCError(f"{label} failed: {e}") from e


class Erc20Reader:
    """
    Read-only ERC-20 + native balance access for one network.

    Addresses must already be checksummed; every method raises a
    Web3RPCError subclass on failure.
    """

    def __init__(self, network: NetworkDescriptor, *, timeout_s: float = 15.0) -> None:
        self.network = network
        self.timeout_s = timeout_s

    @property
    def w3(self) -> Web3:
        return _get_web3(self.network.rpc_url, self.timeout_s)

    def _contract(self, token_address: str):
        return self.w3.eth.contract(address=token_address, abi=ERC20_ABI)

    def balance_of(self, token_address: str, owner: str) -> int:
        return _guarded(
            "erc20.balanceOf",
            lambda: int(self._contract(token_address).functions.balanceOf(owner).call()),
        )

    def decimals(self, token_address: str) -> int:
        return _guarded(
            "erc20.decimals",
            lambda: int(self._contract(token_address).functions.decimals().call()),
        )

    def symbol(self, token_address: str) -> str:
        return _guarded(
            "erc20.symbol",
            lambda: str(self._contract(token_address).functions.symbol().call()),
        )

    def name(self, token_address: str) -> str:
        return _guarded(
            "erc20.name",
            lambda: str(self._contract(token_address).functions.name().call()),
        )

    def native_balance(self, address: str) -> int:
        """
        Return native token balance in wei.
        """
        return _guarded("eth_getBalance", lambda: int(self.w3.eth.get_balance(address)))
