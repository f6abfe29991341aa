## Application settings configuration

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "dev"
    log_level: str = "INFO"

    # Identity is resolved upstream; we only read the forwarded user id
    user_id_header: str = "X-User-Id"
    default_subscription_level: str = "free"
    subscription_overrides: dict[str, str] = {}

    # Provider selection: gemini | groq | ollama
    LLM_PROVIDER: str = "gemini"
    llm_timeout_seconds: float = 120

    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-1.5-flash"

    GROQ_API_KEY: str = ""
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    GROQ_MODEL: str = "llama-3.1-8b-instant"

    # Ollama settings
    ollama_base_url: str = "http://localhost:11434/v1"
    ollama_model: str = "llama3.1"

    analysis_temperature: float = 0.2
    roadmap_temperature: float = 0.4


settings = Settings()
