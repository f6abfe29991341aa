# careercoach/agents/roadmap_planner.py
from careercoach.agents.coercion import Coerced, coerce
from careercoach.agents.fallbacks import FALLBACK_ROADMAP
from careercoach.agents.llm.base import LLMClient
from careercoach.agents.llm.client import get_llm_client
from careercoach.agents.schemas import CATEGORIES, Roadmap
from careercoach.settings import settings


SYSTEM_PLANNER = """You are a career learning-path planner.

You must return ONLY valid JSON (no markdown, no code fences, no commentary).
The JSON must match the given schema exactly.
"""

MIN_NODES = 6
MAX_NODES = 10


def build_roadmap_prompt(role: str) -> str:
    categories = ", ".join(f'"{c}"' for c in CATEGORIES)
    return f"""
Generate a comprehensive learning roadmap for the role: "{role}".

Return ONLY a valid JSON object in this exact format (no markdown, no extra text):
{{
  "title": "Complete roadmap title",
  "description": "Detailed description of the learning path",
  "duration": "X-Y Months",
  "totalNodes": number,
  "nodes": [
    {{
      "id": "1",
      "title": "Topic title",
      "description": "Detailed description of what to learn",
      "duration": "X-Y weeks",
      "completed": false,
      "category": "foundation"
    }}
  ]
}}

Requirements:
- Generate {MIN_NODES}-{MAX_NODES} nodes
- Node ids are "1", "2", ... in order
- "totalNodes" equals the number of nodes
- "completed" is always false
- Categories: {categories}
- Progressive difficulty from foundation to specialization
- Realistic durations
- Specific, actionable descriptions
- Industry-relevant skills
""".strip()


def request_roadmap(llm: LLMClient, role: str) -> str:
    return llm.generate_text(
        system=SYSTEM_PLANNER,
        user=build_roadmap_prompt(role),
        temperature=settings.roadmap_temperature,
    )


def generate_roadmap(role: str, llm: LLMClient | None = None) -> Coerced[Roadmap]:
    role = role.strip()
    if not role:
        raise ValueError("role required")

    llm = llm or get_llm_client()
    return coerce(Roadmap, lambda: request_roadmap(llm, role), FALLBACK_ROADMAP)
