from openai import OpenAI, OpenAIError
from .base import LLMClient, LLMError

class GroqOpenAIClient(LLMClient):
    def __init__(self, * , api_key: str, base_url: str, model: str, timeout: float = 120):
        self.client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        self.model = model

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except OpenAIError as e:
            raise LLMError(f"Groq request failed: {type(e).__name__}: {e}") from e

        content = resp.choices[0].message.content if resp.choices else None
        if not content:
            raise LLMError("Groq returned an empty completion")
        return content.strip()
