from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NetworkDescriptor:
    """
    Static description of the one chain the service reads from.

    Swapping target chains means passing a different descriptor,
    not flipping a runtime setting.
    """

    name: str
    chain_id: int
    rpc_url: str
    explorer_url: str
    native_symbol: str = "ETH"

    def address_url(self, address: str) -> str:
        return f"{self.explorer_url.rstrip('/')}/address/{address}"

    def as_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "chainId": self.chain_id,
            "rpcUrl": self.rpc_url,
            "explorerUrl": self.explorer_url,
            "nativeSymbol": self.native_symbol,
        }


HYPERION_TESTNET = NetworkDescriptor(
    name="Hyperion Testnet",
    chain_id=133717,
    rpc_url="https://hyperion-testnet.metisdevops.link",
    explorer_url="https://hyperion-testnet-explorer.metisdevops.link",
    native_symbol="tMETIS",
)
