## Main application entry point
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from careercoach.settings import settings
from careercoach.auth.deps import NotAuthenticated, NotEntitled
from careercoach.api.routes import router as api_router
from careercoach.coach.routes import router as coach_router


def configure_logging(level: str = settings.log_level) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="[%(asctime)s] [%(name)s] %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


configure_logging()
logger = logging.getLogger("careercoach")

app = FastAPI(title="Career Coach")
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return templates.TemplateResponse(request, "home.html", {})

@app.get("/healthz")
async def healthz():
    return {"ok": True}

@app.exception_handler(NotAuthenticated)
async def not_authenticated_handler(request: Request, exc: NotAuthenticated):
    return JSONResponse({"error": "Unauthorized"}, status_code=401)

@app.exception_handler(NotEntitled)
async def not_entitled_handler(request: Request, exc: NotEntitled):
    logger.info("Blocked AI tool access on %s: %s", request.url.path, exc)
    return JSONResponse({"error": str(exc) or "Forbidden"}, status_code=403)

app.include_router(api_router)
app.include_router(coach_router)

logger.info("Career Coach started (env=%s, provider=%s)", settings.env, settings.LLM_PROVIDER)
