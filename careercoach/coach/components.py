## Coach page components: resume analyzer and roadmap generator
"""
Server-side counterparts of the two coach tabs. Each component owns one
RequestState, so a trigger while a call is pending returns None and makes no
provider call. Every outcome carries the notification the page should show.
"""
import base64
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Literal

from careercoach.agents.coercion import Coerced
from careercoach.agents.fallbacks import PRESET_ROADMAPS
from careercoach.agents.llm.base import LLMClient
from careercoach.agents.resume_analyzer import analyze_resume
from careercoach.agents.roadmap_planner import generate_roadmap
from careercoach.agents.schemas import AnalysisResult, Roadmap
from careercoach.coach.state import RequestState
from careercoach.roadmaps.graph import RoadmapGraph, project_roadmap

logger = logging.getLogger("careercoach.coach")

PDF_MIME_TYPE = "application/pdf"
CUSTOM_ROLE = "custom"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


@dataclass
class UploadedFile:
    name: str
    content_type: str
    data: bytes

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")


@dataclass
class AnalysisOutcome:
    analysis: AnalysisResult | None
    notifications: List[Notification] = field(default_factory=list)
    used_fallback: bool = False


def score_label(score: int) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Needs Improvement"
    return "Poor"


def score_color(score: int) -> str:
    if score >= 80:
        return "success"
    if score >= 60:
        return "warning"
    return "primary"


@dataclass
class RoadmapOutcome:
    roadmap: Roadmap | None
    graph: RoadmapGraph
    notifications: List[Notification] = field(default_factory=list)
    used_fallback: bool = False


class ResumeAnalyzer:
    def __init__(self, llm_factory: Callable[[], LLMClient] | None = None):
        self.llm_factory = llm_factory
        self.state = RequestState()
        self.file: UploadedFile | None = None
        self.analysis: AnalysisResult | None = None

    def upload(self, uploaded: UploadedFile) -> Notification:
        if uploaded.content_type != PDF_MIME_TYPE:
            return Notification("Invalid File Type", "Please upload a PDF file", "destructive")

        self.file = uploaded
        return Notification("File Uploaded", f"{uploaded.name} ready for analysis")

    def analyze(self) -> AnalysisOutcome | None:
        if self.file is None:
            return None
        if not self.state.begin():
            return None

        try:
            llm = self.llm_factory() if self.llm_factory else None
            result: Coerced[AnalysisResult] = analyze_resume(self.file.to_base64(), self.file.name, llm=llm)
        except Exception as e:
            self.state.fail(f"{type(e).__name__}: {e}")
            raise

        self.analysis = result.value

        if result.used_fallback:
            self.state.fail(result.error or "analysis failed")
            note = Notification("Analysis Complete", "Analysis completed with backup system")
        else:
            self.state.succeed()
            note = Notification("Analysis Complete", "Your resume has been analyzed successfully")

        return AnalysisOutcome(result.value, [note], used_fallback=result.used_fallback)


class RoadmapGenerator:
    def __init__(self, llm_factory: Callable[[], LLMClient] | None = None):
        self.llm_factory = llm_factory
        self.state = RequestState()
        self.roadmap: Roadmap | None = None

    def generate(self, role: str, custom_role: str = "") -> RoadmapOutcome | None:
        selected = (custom_role if role == CUSTOM_ROLE else role).strip()
        if not selected:
            return RoadmapOutcome(
                None,
                RoadmapGraph(),
                [Notification("Role Required",
                              "Please select or enter a role to generate roadmap",
                              "destructive")],
            )

        if not self.state.begin():
            return None

        notifications: List[Notification] = []
        used_fallback = False

        if role == CUSTOM_ROLE:
            try:
                llm = self.llm_factory() if self.llm_factory else None
                result = generate_roadmap(selected, llm=llm)
            except Exception as e:
                self.state.fail(f"{type(e).__name__}: {e}")
                raise
            roadmap = result.value
            used_fallback = result.used_fallback
            if used_fallback:
                notifications.append(
                    Notification("Error", "Failed to generate roadmap. Using fallback.", "destructive")
                )
        else:
            roadmap = PRESET_ROADMAPS.get(selected)
            if roadmap is not None:
                roadmap = roadmap.model_copy(deep=True)

        self.roadmap = roadmap
        graph = project_roadmap(roadmap)

        if not graph.nodes:
            logger.error("Invalid roadmap data for role %r", selected)
            self.state.fail("no roadmap nodes")
        elif used_fallback:
            self.state.fail("generation failed")
        else:
            self.state.succeed()

        return RoadmapOutcome(roadmap, graph, notifications, used_fallback=used_fallback)
