from __future__ import annotations

from fastapi import Depends

from app.balance.service import BalanceQueryService
from app.chat.dispatcher import Dispatcher
from app.config import get_settings
from chain.networks import HYPERION_TESTNET, NetworkDescriptor
from llm.client import ConversationalFallback, build_fallback
from llm.prompts import build_system_context


def get_network() -> NetworkDescriptor:
    return HYPERION_TESTNET


def get_balance_service(network: NetworkDescriptor = Depends(get_network)) -> BalanceQueryService:
    return BalanceQueryService(network, timeout_s=get_settings().RPC_TIMEOUT_S)


def get_fallback() -> ConversationalFallback | None:
    return build_fallback(get_settings())


def get_dispatcher(
    balance_service: BalanceQueryService = Depends(get_balance_service),
    fallback: ConversationalFallback | None = Depends(get_fallback),
) -> Dispatcher:
    return Dispatcher(
        balance_service=balance_service,
        fallback=fallback,
        system_context=build_system_context(balance_service.network),
    )
