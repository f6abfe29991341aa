## Shared FastAPI dependencies
from careercoach.agents.llm.base import LLMClient
from careercoach.agents.llm.client import get_llm_client

def get_llm() -> LLMClient:
    return get_llm_client()
