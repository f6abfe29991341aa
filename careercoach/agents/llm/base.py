## Base LLM Client Interface
from abc import ABC, abstractmethod


class LLMError(Exception):
    """Provider call failed: transport error, non-success status, refusal or empty output."""


class LLMClient(ABC):
    @abstractmethod
    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        """
        Send one prompt and block until the full completion text is available.
        Implementations raise LLMError for every provider-side failure.
        """
        raise NotImplementedError
