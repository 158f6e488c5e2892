from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # conversational fallback; no key means chat answers 500
    openai_api_key: str = ""
    llm_provider: str = "openai"
    llm_model: str = "gpt-4o-mini"  # safe default- override via env
    llm_temperature: float = 0.7
    llm_timeout_s: int = 30

    # per-request HTTP timeout for JSON-RPC reads
    rpc_timeout_s: float = 15.0

    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def OPENAI_API_KEY(self) -> str:
        return self.openai_api_key

    @property
    def LLM_PROVIDER(self) -> str:
        return self.llm_provider

    @property
    def LLM_MODEL(self) -> str:
        return self.llm_model

    @property
    def LLM_TEMPERATURE(self) -> float:
        return self.llm_temperature

    @property
    def LLM_TIMEOUT_S(self) -> int:
        return self.llm_timeout_s

    @property
    def RPC_TIMEOUT_S(self) -> float:
        return self.rpc_timeout_s


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader (process-level).
    """
    return Settings()
