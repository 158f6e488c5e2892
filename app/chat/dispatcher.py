from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from app.balance.errors import CompletionError, ConfigurationError, QueryError
from app.balance.formatter import render_balance_text, render_error_text
from app.balance.intent import classify
from app.balance.service import BalanceQueryService
from llm.client import ChatTurn, ConversationalFallback

logger = logging.getLogger(__name__)


class DispatchState(str, Enum):
    CLASSIFYING = "CLASSIFYING"
    BALANCE_FLOW = "BALANCE_FLOW"
    CONVERSATIONAL_FLOW = "CONVERSATIONAL_FLOW"
    DONE = "DONE"


class Route(str, Enum):
    BALANCE = "balance"
    CONVERSATION = "conversation"


@dataclass(frozen=True)
class DispatchResult:
    route: Route
    response: str


class Dispatcher:
    """
    Routes one chat message to the balance lookup or to the LLM.

    Balance lookups always end in text, success or not. The conversational
    branch raises ConfigurationError when no LLM is configured and
    CompletionError when the provider call fails.
    """

    def __init__(
        self,
        *,
        balance_service: BalanceQueryService,
        fallback: ConversationalFallback | None,
        system_context: str,
    ) -> None:
        self.balance_service = balance_service
        self.fallback = fallback
        self.system_context = system_context

    def dispatch(self, message: str, history: Sequence[ChatTurn] = ()) -> DispatchResult:
        state = DispatchState.CLASSIFYING
        intent = classify(message)

        if intent.matched:
            state = self._transition(state, DispatchState.BALANCE_FLOW)
            text = self._balance_flow(intent.contract_address, intent.wallet_address)
            self._transition(state, DispatchState.DONE)
            return DispatchResult(route=Route.BALANCE, response=text)

        state = self._transition(state, DispatchState.CONVERSATIONAL_FLOW)
        text = self._conversational_flow(message, history)
        self._transition(state, DispatchState.DONE)
        return DispatchResult(route=Route.CONVERSATION, response=text)

    def _transition(self, current: DispatchState, nxt: DispatchState) -> DispatchState:
        logger.debug("dispatch %s -> %s", current.value, nxt.value)
        return nxt

    def _balance_flow(self, contract_address: str, wallet_address: str) -> str:
        network_name = self.balance_service.network.name
        try:
            result = self.balance_service.query_balance(contract_address, wallet_address)
        except QueryError as e:
            logger.info("balance flow failed code=%s", e.code)
            return render_error_text(e, network_name=network_name)
        return render_balance_text(result)

    def _conversational_flow(self, message: str, history: Sequence[ChatTurn]) -> str:
        if self.fallback is None:
            raise ConfigurationError("OPENAI_API_KEY is not configured")
        try:
            return self.fallback.complete(message, history, system=self.system_context)
        except Exception as e:
            logger.warning("conversational fallback failed: %s", e)
            raise CompletionError("Failed to get a response from the AI assistant") from e
