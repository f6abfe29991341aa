from careercoach.settings import settings
from careercoach.agents.llm.base import LLMClient
from careercoach.agents.llm.gemini import GeminiClient
from careercoach.agents.llm.ollama import OllamaOpenAIClient
from careercoach.agents.llm.groq import GroqOpenAIClient

def get_llm_client() -> LLMClient:
    provider = settings.LLM_PROVIDER.lower()

    if provider == "groq":
        return GroqOpenAIClient(
            api_key=settings.GROQ_API_KEY,
            base_url=settings.GROQ_BASE_URL,
            model=settings.GROQ_MODEL,
            timeout=settings.llm_timeout_seconds,
        )

    if provider == "ollama":
        return OllamaOpenAIClient(
            base_url = settings.ollama_base_url,
            model = settings.ollama_model,
            timeout = settings.llm_timeout_seconds,
        )

    return GeminiClient(
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        timeout=settings.llm_timeout_seconds,
    )
