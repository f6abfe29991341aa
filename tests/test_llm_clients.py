import httpx
import pytest

from careercoach.agents.llm.base import LLMError
from careercoach.agents.llm.client import get_llm_client
from careercoach.agents.llm import gemini
from careercoach.agents.llm.gemini import GeminiClient
from careercoach.agents.llm.groq import GroqOpenAIClient
from careercoach.agents.llm.ollama import OllamaOpenAIClient
from careercoach.settings import settings


def _ollama(handler):
    return OllamaOpenAIClient(
        base_url="http://ollama.test/v1/",
        model="llama3.1",
        transport=httpx.MockTransport(handler),
    )


def test_ollama_returns_completion_text():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = request.read()
        return httpx.Response(200, json={"choices": [{"message": {"content": '{"ok": true}'}}]})

    text = _ollama(handler).generate_text(system="sys", user="hello", temperature=0.3)

    assert text == '{"ok": true}'
    assert seen["url"] == "http://ollama.test/v1/chat/completions"
    assert b'"temperature":0.3' in seen["body"].replace(b" ", b"")


def test_ollama_error_status_raises_llm_error():
    client = _ollama(lambda request: httpx.Response(503, text="overloaded"))
    with pytest.raises(LLMError):
        client.generate_text(system="s", user="u")


def test_ollama_unexpected_body_raises_llm_error():
    client = _ollama(lambda request: httpx.Response(200, json={"choices": []}))
    with pytest.raises(LLMError):
        client.generate_text(system="s", user="u")


def test_ollama_connection_error_raises_llm_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(LLMError):
        _ollama(handler).generate_text(system="s", user="u")


def test_gemini_without_key_fails_as_provider_error():
    client = GeminiClient(api_key="", model="gemini-1.5-flash")
    with pytest.raises(LLMError):
        client.generate_text(system="s", user="u")


@pytest.mark.parametrize(
    "provider,expected",
    [("ollama", OllamaOpenAIClient), ("groq", GroqOpenAIClient), ("gemini", GeminiClient), ("GEMINI", GeminiClient)],
)
def test_provider_selection(monkeypatch, provider, expected):
    monkeypatch.setattr(settings, "LLM_PROVIDER", provider)
    monkeypatch.setattr(settings, "GROQ_API_KEY", "test-key")
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "")
    assert isinstance(get_llm_client(), expected)


def test_gemini_configures_library_once_per_key(monkeypatch):
    calls = []
    monkeypatch.setattr(gemini.genai, "configure", lambda **kwargs: calls.append(kwargs))
    gemini.configure_gemini.cache_clear()

    for _ in range(3):
        GeminiClient(api_key="key-a", model="gemini-1.5-flash")
    GeminiClient(api_key="key-b", model="gemini-1.5-flash")

    assert calls == [{"api_key": "key-a"}, {"api_key": "key-b"}]
    gemini.configure_gemini.cache_clear()
