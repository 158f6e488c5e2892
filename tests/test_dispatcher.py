from __future__ import annotations

import pytest

from app.balance.errors import CompletionError, ConfigurationError
from app.balance.service import BalanceQueryService
from app.chat.dispatcher import Dispatcher, Route
from chain.rpc import ContractReadError
from fakes import CONTRACT, TEST_NETWORK, WALLET, FakeFallback, FakeReader
from llm.prompts import build_system_context

BALANCE_MESSAGE = f"Check token balance for contract {CONTRACT} and wallet {WALLET}"


def _dispatcher(reader=None, fallback=None) -> Dispatcher:
    return Dispatcher(
        balance_service=BalanceQueryService(TEST_NETWORK, reader=reader or FakeReader()),
        fallback=fallback,
        system_context=build_system_context(TEST_NETWORK),
    )


def test_balance_message_goes_to_balance_flow():
    fallback = FakeFallback()
    result = _dispatcher(fallback=fallback).dispatch(BALANCE_MESSAGE)

    assert result.route == Route.BALANCE
    assert "Balance: 1.5 TKN" in result.response
    assert fallback.calls == []


def test_balance_flow_failure_is_rendered_as_text():
    reader = FakeReader(balance=ContractReadError("execution reverted"))
    result = _dispatcher(reader=reader).dispatch(BALANCE_MESSAGE)

    assert result.route == Route.BALANCE
    assert "not a valid ERC-20 token" in result.response
    assert "Tip:" in result.response


def test_balance_flow_symbol_failure_still_succeeds():
    reader = FakeReader(symbol=RuntimeError("no symbol"))
    result = _dispatcher(reader=reader).dispatch(BALANCE_MESSAGE)
    assert "Symbol: UNKNOWN" in result.response


def test_general_message_passes_fallback_text_through():
    fallback = FakeFallback(reply="  A blockchain is a shared ledger.\n")
    reader = FakeReader()
    result = _dispatcher(reader=reader, fallback=fallback).dispatch("What is blockchain?")

    assert result.route == Route.CONVERSATION
    assert result.response == "  A blockchain is a shared ledger.\n"
    assert reader.calls == []
    assert fallback.calls[0]["message"] == "What is blockchain?"
    assert "Chain ID: 31337" in fallback.calls[0]["system"]


def test_history_is_forwarded_to_fallback():
    fallback = FakeFallback()
    history = [("user", "hi"), ("assistant", "hello")]
    _dispatcher(fallback=fallback).dispatch("and what is a token?", history)
    assert fallback.calls[0]["history"] == history


def test_balance_phrase_with_one_address_goes_to_fallback():
    fallback = FakeFallback()
    result = _dispatcher(fallback=fallback).dispatch(f"check balance of {WALLET}")
    assert result.route == Route.CONVERSATION


def test_missing_fallback_is_configuration_error():
    with pytest.raises(ConfigurationError) as exc_info:
        _dispatcher(fallback=None).dispatch("What is blockchain?")
    assert exc_info.value.http_status == 500


def test_missing_fallback_does_not_affect_balance_flow():
    result = _dispatcher(fallback=None).dispatch(BALANCE_MESSAGE)
    assert result.route == Route.BALANCE


def test_fallback_failure_is_completion_error():
    fallback = FakeFallback(error=RuntimeError("rate limited"))
    with pytest.raises(CompletionError):
        _dispatcher(fallback=fallback).dispatch("What is blockchain?")


def test_malformed_address_in_message_never_reaches_rpc():
    reader = FakeReader()
    fallback = FakeFallback()
    result = _dispatcher(reader=reader, fallback=fallback).dispatch(
        f"Check balance: contract 0xZZZZ (invalid) wallet {WALLET}"
    )

    assert result.route == Route.CONVERSATION
    assert reader.calls == []
