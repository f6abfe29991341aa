from functools import lru_cache

import google.generativeai as genai
from google.api_core.exceptions import GoogleAPIError

from careercoach.agents.llm.base import LLMClient, LLMError

@lru_cache(maxsize=None)
def configure_gemini(api_key: str) -> None:
    # genai keeps its configuration globally; set it once per key, not per client
    genai.configure(api_key=api_key)


class GeminiClient(LLMClient):
    def __init__(self, * , api_key: str, model: str, timeout: float = 120):
        self.api_key = api_key
        if api_key:
            configure_gemini(api_key)
        self.model = genai.GenerativeModel(model)
        self.timeout = timeout

    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        if not self.api_key:
            raise LLMError("GEMINI_API_KEY is not configured")

        # Gemini gets a single user turn: instructions first, then the request
        prompt = f"{system}\n{user}" if system else user
        try:
            resp = self.model.generate_content(
                prompt,
                generation_config=genai.GenerationConfig(temperature=temperature),
                request_options={"timeout": self.timeout},
            )
            # .text raises ValueError when the response was blocked
            text = resp.text
        except (GoogleAPIError, ValueError) as e:
            raise LLMError(f"Gemini request failed: {type(e).__name__}: {e}") from e

        if not text or not text.strip():
            raise LLMError("Gemini returned an empty response")
        return text
