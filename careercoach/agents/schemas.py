## Pydantic Schemas for Structured Output
from typing import List, Literal

from pydantic import BaseModel, conint, field_validator, model_validator

Category = Literal["foundation", "intermediate", "advanced", "specialization"]
CATEGORIES: tuple[str, ...] = ("foundation", "intermediate", "advanced", "specialization")

Score = conint(ge=0, le=100)


class AnalysisResult(BaseModel):
    overallScore: Score
    contactScore: Score
    experienceScore: Score
    improvements: List[str]
    strengths: List[str]
    summary: str


class RoadmapNode(BaseModel):
    id: str
    title: str
    description: str
    duration: str
    completed: bool = False
    category: Category

    @field_validator("completed")
    @classmethod
    def _not_completed(cls, v: bool) -> bool:
        # Progress is never tracked; a fresh roadmap starts with nothing done
        return False


class Roadmap(BaseModel):
    title: str
    description: str
    duration: str
    # Not checked against len(nodes); the model is asked for it but may miscount
    totalNodes: int
    nodes: List[RoadmapNode]

    @model_validator(mode="after")
    def _unique_node_ids(self) -> "Roadmap":
        # Node ids key the graph; a repeat would turn the chain into a loop
        seen = set()
        for node in self.nodes:
            if node.id in seen:
                raise ValueError(f"duplicate node id {node.id!r}")
            seen.add(node.id)
        return self
