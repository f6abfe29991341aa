# careercoach/api/routes.py
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from careercoach.deps import get_llm
from careercoach.auth.deps import CurrentUser, require_ai_access
from careercoach.agents.llm.base import LLMClient
from careercoach.agents.resume_analyzer import analyze_resume
from careercoach.agents.roadmap_planner import generate_roadmap

logger = logging.getLogger("careercoach.api")
router = APIRouter(prefix="/api")


@router.post("/analyze-resume")
async def analyze_resume_route(
    request: Request,
    user: CurrentUser = Depends(require_ai_access),
    llm: LLMClient = Depends(get_llm),
):
    try:
        body = await request.json()
        file_b64 = body.get("file")
        file_name = body.get("fileName")
        if not file_b64 or not file_name:
            return JSONResponse({"error": "Missing file or fileName"}, status_code=400)

        # Provider and decode failures come back as the fallback analysis
        result = await run_in_threadpool(analyze_resume, str(file_b64), str(file_name), llm=llm)
        if result.used_fallback:
            logger.info("Served fallback analysis to user=%s file=%s", user.id, file_name)
        return JSONResponse(result.value.model_dump())

    except Exception:
        logger.exception("Failed to analyze resume")
        return JSONResponse({"error": "Failed to analyze resume"}, status_code=500)


@router.post("/roadmap")
async def roadmap_route(
    request: Request,
    user: CurrentUser = Depends(require_ai_access),
    llm: LLMClient = Depends(get_llm),
):
    try:
        body = await request.json()
        role = body.get("role")
        if not role or not str(role).strip():
            return JSONResponse({"ok": False, "error": "role required"}, status_code=400)

        result = await run_in_threadpool(generate_roadmap, str(role), llm=llm)
        if result.used_fallback:
            # Callers render their own fallback; the API reports the failure
            logger.error("Roadmap generation failed for user=%s role=%r: %s", user.id, role, result.error)
            return JSONResponse({"ok": False, "error": "Failed to generate roadmap"}, status_code=500)

        return JSONResponse({"ok": True, "roadmap": result.value.model_dump()})

    except Exception:
        logger.exception("Roadmap generation error")
        return JSONResponse({"ok": False, "error": "Failed to generate roadmap"}, status_code=500)
