"""
Tooth Trauma Tutor - FastAPI Application

Endpoints for:
- Stateless remedy reactions
- Session-based simulation (condition toggle, remedy selection, reset)
- The single-page view of the tooth character
"""
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from toothtutor.config import settings
from toothtutor.core.domain import Condition
from toothtutor.core.presentation import build_view, filter_remedies
from toothtutor.core.reactions import ReactionResolver
from toothtutor.core.state import SessionSnapshot
from toothtutor.models import (
    ConditionInfo,
    ConditionListResponse,
    ConditionRequest,
    HealthResponse,
    ReactionRequest,
    ReactionResponse,
    RemedyListResponse,
    RemedyRequest,
    SessionCreateRequest,
    SessionResponse,
)
from toothtutor.services import ReactionService
from toothtutor.utils import get_logger, setup_logging, ToothTutorError, SessionNotFoundError

setup_logging(settings.log_level, settings.log_file)
logger = get_logger(__name__)

BASE_DIR = Path(__file__).resolve().parent
START_TIME = datetime.now()

_reaction_service: Optional[ReactionService] = None


def get_reaction_service() -> ReactionService:
    """Process-wide service, built on first use."""
    global _reaction_service
    if _reaction_service is None:
        _reaction_service = ReactionService(resolver=ReactionResolver())
    return _reaction_service


# ---- Application Lifespan ----

@asynccontextmanager
async def lifespan(app: FastAPI):
    service = get_reaction_service()
    logger.info(
        f"{settings.app_name} ready (Gemini available: {service.resolver.client.is_available})"
    )
    yield
    logger.info(f"{settings.app_name} shut down.")


# ---- FastAPI Application ----

app = FastAPI(
    title="Tooth Trauma Tutor API",
    description="Educational simulation of how a damaged tooth reacts to household substances",
    version=settings.version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


@app.exception_handler(ToothTutorError)
async def tutor_error_handler(request: Request, exc: ToothTutorError):
    if exc.status_code >= 500:
        logger.error(f"{exc.code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _session_response(snapshot: SessionSnapshot) -> SessionResponse:
    data = snapshot.to_dict()
    data["view"] = build_view(snapshot)
    return SessionResponse(**data)


# ---- Page ----

@app.get("/", response_class=HTMLResponse, tags=["Page"])
async def index(
    request: Request,
    session_id: Optional[str] = None,
    q: str = "",
    service: ReactionService = Depends(get_reaction_service),
):
    """Render the simulation page, starting a session if none is given."""
    snapshot = None
    if session_id:
        try:
            snapshot = service.get_session(session_id)
        except SessionNotFoundError:
            logger.info(f"Unknown session {session_id} requested, starting a new one")
    if snapshot is None:
        snapshot = await service.create_session()

    return templates.TemplateResponse(
        request,
        "index.html",
        {"view": build_view(snapshot, q), "query": q},
    )


# ---- Health & Reference ----

@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(service: ReactionService = Depends(get_reaction_service)):
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=settings.version,
        timestamp=datetime.now().isoformat(),
        uptime_seconds=(datetime.now() - START_TIME).total_seconds(),
        gemini_available=service.resolver.client.is_available,
        stats=service.get_stats(),
    )


@app.get("/api/v1/remedies", response_model=RemedyListResponse, tags=["Reference"])
async def list_remedies(q: str = Query("", description="Case-insensitive substring filter")):
    """Preset remedies, optionally filtered."""
    return RemedyListResponse(remedies=filter_remedies(q), query=q)


@app.get("/api/v1/conditions", response_model=ConditionListResponse, tags=["Reference"])
async def list_conditions():
    return ConditionListResponse(conditions=[
        ConditionInfo(value=c.value, label=c.label, description=c.description)
        for c in Condition
    ])


# ---- Reactions ----

@app.post("/api/v1/reactions", response_model=ReactionResponse, tags=["Reactions"])
async def resolve_reaction(
    request: ReactionRequest,
    service: ReactionService = Depends(get_reaction_service),
):
    """Resolve one remedy reaction without touching any session."""
    reaction = await service.resolve(request.remedy, request.condition)
    return ReactionResponse(**reaction.to_dict())


# ---- Sessions ----

@app.post("/api/v1/sessions", response_model=SessionResponse, status_code=201, tags=["Sessions"])
async def create_session(
    request: Optional[SessionCreateRequest] = None,
    service: ReactionService = Depends(get_reaction_service),
):
    condition = request.condition if request else Condition.BROKEN
    snapshot = await service.create_session(condition)
    return _session_response(snapshot)


@app.get("/api/v1/sessions/{session_id}", response_model=SessionResponse, tags=["Sessions"])
async def get_session(session_id: str, service: ReactionService = Depends(get_reaction_service)):
    return _session_response(service.get_session(session_id))


@app.post("/api/v1/sessions/{session_id}/condition", response_model=SessionResponse, tags=["Sessions"])
async def change_condition(
    session_id: str,
    request: ConditionRequest,
    service: ReactionService = Depends(get_reaction_service),
):
    snapshot = await service.change_condition(session_id, request.condition)
    return _session_response(snapshot)


@app.post("/api/v1/sessions/{session_id}/remedy", response_model=SessionResponse, tags=["Sessions"])
async def select_remedy(
    session_id: str,
    request: RemedyRequest,
    service: ReactionService = Depends(get_reaction_service),
):
    """Apply a preset or free-text remedy to the session's tooth."""
    snapshot = await service.select_remedy(session_id, request.remedy)
    return _session_response(snapshot)


@app.post("/api/v1/sessions/{session_id}/reset", response_model=SessionResponse, tags=["Sessions"])
async def reset_session(session_id: str, service: ReactionService = Depends(get_reaction_service)):
    snapshot = await service.reset(session_id)
    return _session_response(snapshot)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("toothtutor.main:app", host="0.0.0.0", port=8000, reload=False)
