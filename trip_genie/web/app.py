from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.concurrency import run_in_threadpool

from trip_genie.api.models import (
    PlanRequest,
    PlanResponse,
    SectionModel,
    SegmentRequest,
    SegmentResponse,
)
from trip_genie.config.settings import settings
from trip_genie.gemini_client import GeminiClient
from trip_genie.models.travel import TravelRequestError
from trip_genie.parsing.segmenter import segment_with_strategy
from trip_genie.planner import generate_travel_plan
from trip_genie.presentation import duration_label, plan_title
from trip_genie.web.security import api_key_auth, rate_limiter

logger = logging.getLogger("trip_genie.web")
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))


# -------------------------------------------------------------------
# Lifespan: build the generation client once at startup
# -------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    client = GeminiClient()
    if not client.is_configured():
        logger.warning("No Gemini API key configured; /plan requests will fail")

    app.state.gemini_client = client

    yield


app = FastAPI(
    title="TripGenie API",
    description="Generate travel plans and split them into titled sections.",
    version="0.1.0",
    lifespan=lifespan,
)

# -------------------------------------------------------------------
# CORS – allow everything for now (tighten later)
# -------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------------------------------------------------
# Middleware
# -------------------------------------------------------------------


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Log method, path, and response status.
    """
    logger.info(f"Incoming request: {request.method} {request.url.path}")
    start = time.time()

    response = await call_next(request)

    duration_ms = (time.time() - start) * 1000
    logger.info(
        f"Completed {request.method} {request.url.path} "
        f"with status {response.status_code} in {duration_ms:.2f}ms"
    )

    return response


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------


def _get_client(app_obj: FastAPI) -> GeminiClient:
    """
    Fetch the generation client from app.state, creating it if the
    lifespan handler has not run (e.g. TestClient without a context).
    """
    client = getattr(app_obj.state, "gemini_client", None)
    if client is None:
        client = GeminiClient()
        app_obj.state.gemini_client = client
    return client


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------


@app.get("/health", summary="Health check")
async def health() -> dict:
    return {"status": "ok"}


@app.post(
    "/segment",
    response_model=SegmentResponse,
    summary="Split generated text into titled sections",
    dependencies=[Depends(api_key_auth), Depends(rate_limiter)],
)
async def segment_text(payload: SegmentRequest) -> SegmentResponse:
    segmentation = segment_with_strategy(payload.text)
    return SegmentResponse(
        strategy=segmentation.strategy.value,
        sections=[SectionModel.from_section(s) for s in segmentation.sections],
    )


@app.post(
    "/plan",
    response_model=PlanResponse,
    summary="Generate and segment a travel plan",
    dependencies=[Depends(api_key_auth), Depends(rate_limiter)],
)
async def create_plan(payload: PlanRequest, request: Request) -> PlanResponse:
    travel_request = payload.to_travel_request()
    client = _get_client(request.app)

    try:
        result = await run_in_threadpool(generate_travel_plan, travel_request, client)
    except TravelRequestError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    if not result.ok:
        raise HTTPException(status_code=502, detail=result.error)

    return PlanResponse(
        title=plan_title(travel_request),
        duration=duration_label(travel_request) or None,
        strategy=result.strategy.value if result.strategy else None,
        sections=[SectionModel.from_section(s) for s in result.recommendations],
    )
