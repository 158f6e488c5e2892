from __future__ import annotations

import pytest
import requests
from web3.exceptions import BadFunctionCallOutput, ContractLogicError

from app.balance.errors import TransportFailureError
from app.balance.service import BalanceQueryService
from chain.address import is_valid_address, to_checksum
from chain.networks import HYPERION_TESTNET, NetworkDescriptor
from chain.rpc import ContractReadError, Erc20Reader, RPCTransportError, Web3RPCError, _guarded


def _raise(exc):
    def fn():
        raise exc

    return fn


def test_guarded_passes_value_through():
    assert _guarded("x", lambda: 7) == 7


@pytest.mark.parametrize(
    "exc",
    [ContractLogicError("execution reverted"), BadFunctionCallOutput("no code")],
)
def test_guarded_contract_errors(exc):
    with pytest.raises(ContractReadError):
        _guarded("erc20.balanceOf", _raise(exc))


@pytest.mark.parametrize(
    "exc",
    [requests.exceptions.ConnectionError("refused"), requests.exceptions.ReadTimeout("slow")],
)
def test_guarded_transport_errors(exc):
    with pytest.raises(RPCTransportError):
        _guarded("eth_getBalance", _raise(exc))


def test_guarded_other_errors():
    with pytest.raises(Web3RPCError) as exc_info:
        _guarded("erc20.name", _raise(KeyError("result")))
    assert not isinstance(exc_info.value, (ContractReadError, RPCTransportError))


@pytest.mark.parametrize(
    "value,valid",
    [
        ("0x" + "a" * 40, True),
        ("0x" + "AbCdEf0123" * 4, True),
        ("0x" + "a" * 39, False),
        ("0x" + "a" * 41, False),
        ("0X" + "a" * 40, False),
        ("0x" + "g" * 40, False),
        ("a" * 42, False),
        (None, False),
        (1234, False),
    ],
)
def test_is_valid_address(value, valid):
    assert is_valid_address(value) is valid


def test_to_checksum_normalises_case():
    lower = "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"
    assert to_checksum(lower) == "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
    assert to_checksum(lower.upper().replace("0X", "0x")) == "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


def test_network_address_url():
    assert HYPERION_TESTNET.address_url("0xabc") == f"{HYPERION_TESTNET.explorer_url}/address/0xabc"


def _dead_network() -> NetworkDescriptor:
    # nothing listens on the discard port
    return NetworkDescriptor(
        name="Dead Chain",
        chain_id=1,
        rpc_url="http://127.0.0.1:9",
        explorer_url="https://explorer.invalid",
    )


def test_real_reader_unreachable_node_is_rpc_error():
    reader = Erc20Reader(_dead_network(), timeout_s=1)
    with pytest.raises(Web3RPCError):
        reader.native_balance(to_checksum("0x" + "b" * 40))


def test_service_with_real_reader_unreachable_node_is_transport_failure():
    service = BalanceQueryService(_dead_network(), timeout_s=1)
    assert isinstance(service.reader, Erc20Reader)
    with pytest.raises(TransportFailureError):
        service.query_balance("0x" + "a" * 40, "0x" + "b" * 40)
