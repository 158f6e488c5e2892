from __future__ import annotations

import threading

from chain.networks import NetworkDescriptor

CONTRACT = "0x" + "a" * 40
WALLET = "0x" + "b" * 40

TEST_NETWORK = NetworkDescriptor(
    name="Test Chain",
    chain_id=31337,
    rpc_url="http://127.0.0.1:8545",
    explorer_url="https://explorer.test",
    native_symbol="TST",
)


class FakeReader:
    """
    In-memory stand-in for chain.rpc.Erc20Reader.

    Pass an exception instance for any field to make that read fail.
    """

    def __init__(
        self,
        *,
        balance=1500000000000000000,
        decimals=18,
        symbol="TKN",
        name="Test Token",
        native=2 * 10**18,
    ) -> None:
        self.values = {
            "balance_of": balance,
            "decimals": decimals,
            "symbol": symbol,
            "name": name,
            "native_balance": native,
        }
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def _answer(self, method: str):
        with self._lock:
            self.calls.append(method)
        value = self.values[method]
        if isinstance(value, Exception):
            raise value
        return value

    def balance_of(self, token_address: str, owner: str) -> int:
        return self._answer("balance_of")

    def decimals(self, token_address: str) -> int:
        return self._answer("decimals")

    def symbol(self, token_address: str) -> str:
        return self._answer("symbol")

    def name(self, token_address: str) -> str:
        return self._answer("name")

    def native_balance(self, address: str) -> int:
        return self._answer("native_balance")


class FakeFallback:
    def __init__(self, reply: str = "fallback reply", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    def complete(self, message, history=(), *, system):
        self.calls.append({"message": message, "history": list(history), "system": system})
        if self.error is not None:
            raise self.error
        return self.reply
