# Coach pages: resume analyzer + roadmap generator tabs
from pathlib import Path

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from careercoach.deps import get_llm
from careercoach.auth.deps import CurrentUser, require_ai_access
from careercoach.agents.llm.base import LLMClient
from careercoach.coach.components import (
    CUSTOM_ROLE,
    ResumeAnalyzer,
    RoadmapGenerator,
    UploadedFile,
    score_color,
    score_label,
)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
router = APIRouter(prefix="/coach")

ROLE_CHOICES = [
    ("react-developer", "React Developer"),
    ("python-developer", "Python Developer"),
    (CUSTOM_ROLE, "Custom Role"),
]


def _render(request: Request, **context):
    base = {
        "tab": "analyzer",
        "roles": ROLE_CHOICES,
        "notifications": [],
        "analysis": None,
        "roadmap": None,
        "graph": None,
        "role": "",
        "custom_role": "",
        "score_label": score_label,
        "score_color": score_color,
    }
    base.update(context)
    return templates.TemplateResponse(request, "coach.html", base)


@router.get("", response_class=HTMLResponse)
@router.get("/", response_class=HTMLResponse)
def coach_page(request: Request, tab: str = "analyzer"):
    return _render(request, tab="roadmap" if tab == "roadmap" else "analyzer")


@router.post("/resume", response_class=HTMLResponse)
def analyze_resume_page(
    request: Request,
    resume: UploadFile = File(...),
    user: CurrentUser = Depends(require_ai_access),
    llm: LLMClient = Depends(get_llm),
):
    analyzer = ResumeAnalyzer(llm_factory=lambda: llm)

    # Type check happens before the body is read or any provider call is made
    uploaded = UploadedFile(
        name=resume.filename or "resume.pdf",
        content_type=resume.content_type or "",
        data=b"",
    )
    upload_note = analyzer.upload(uploaded)
    if analyzer.file is None:
        return _render(request, tab="analyzer", notifications=[upload_note])

    uploaded.data = resume.file.read()
    outcome = analyzer.analyze()

    return _render(
        request,
        tab="analyzer",
        notifications=[upload_note, *outcome.notifications],
        analysis=outcome.analysis,
    )


@router.post("/roadmap", response_class=HTMLResponse)
def generate_roadmap_page(
    request: Request,
    role: str = Form(""),
    custom_role: str = Form(""),
    user: CurrentUser = Depends(require_ai_access),
    llm: LLMClient = Depends(get_llm),
):
    generator = RoadmapGenerator(llm_factory=lambda: llm)
    outcome = generator.generate(role, custom_role)

    return _render(
        request,
        tab="roadmap",
        role=role,
        custom_role=custom_role,
        notifications=outcome.notifications,
        roadmap=outcome.roadmap,
        graph=outcome.graph.to_dict() if outcome.graph.nodes else None,
    )
