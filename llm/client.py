from __future__ import annotations

import logging
from typing import Iterable, Protocol, Sequence

from app.config import Settings

logger = logging.getLogger(__name__)

ChatTurn = tuple[str, str]  # (role, content), role in {"user", "assistant"}


class ConversationalFallback(Protocol):
    def complete(self, message: str, history: Sequence[ChatTurn] = (), *, system: str) -> str: ...


class LLMClient:
    def __init__(
        self,
        *,
        model: str | None = None,
        provider: str | None = None,
        api_key: str | None = None,
        temperature: float = 0.0,
        timeout_s: int = 30,
    ) -> None:
        self.model = model
        self.provider = provider
        self.api_key = api_key
        self.temperature = temperature
        self.timeout_s = timeout_s

    def complete(self, message: str, history: Sequence[ChatTurn] = (), *, system: str) -> str:
        """
        Plain-text chat completion. History is forwarded for this call only.
        """
        return self._call_provider(system=system, history=history, message=message)

    def _call_provider(self, *, system: str, history: Iterable[ChatTurn], message: str) -> str:
        if self.provider == "openai":
            return self._call_openai(system=system, history=history, message=message)
        raise RuntimeError("LLM provider not configured")

    def _call_openai(self, *, system: str, history: Iterable[ChatTurn], message: str) -> str:
        if not self.api_key:
            raise RuntimeError("OPENAI_API_KEY is not set")
        try:
            from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
            from langchain_openai import ChatOpenAI
        except Exception as e:
            raise RuntimeError(f"LangChain OpenAI client not available: {e}") from e

        messages = [SystemMessage(content=system)]
        for role, content in history:
            if role == "assistant":
                messages.append(AIMessage(content=content))
            else:
                messages.append(HumanMessage(content=content))
        messages.append(HumanMessage(content=message))

        logger.info(
            "LLM call start provider=openai model=%s history_len=%s",
            self.model or "gpt-4o-mini",
            len(messages) - 2,
        )
        llm = ChatOpenAI(
            model=self.model or "gpt-4o-mini",
            temperature=self.temperature,
            timeout=self.timeout_s,
            api_key=self.api_key,
        )
        response = llm.invoke(messages)
        output_text = response.content
        if not output_text or not isinstance(output_text, str):
            raise RuntimeError("OpenAI returned empty content")
        logger.info("LLM call success provider=openai output_len=%s", len(output_text))
        return output_text


def build_fallback(settings: Settings) -> LLMClient | None:
    """
    None when no credential is configured; callers treat that as
    "conversation unavailable", not as a crash.
    """
    if not settings.OPENAI_API_KEY:
        return None
    return LLMClient(
        model=settings.LLM_MODEL,
        provider=settings.LLM_PROVIDER,
        api_key=settings.OPENAI_API_KEY,
        temperature=settings.LLM_TEMPERATURE,
        timeout_s=settings.LLM_TIMEOUT_S,
    )
