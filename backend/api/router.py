import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_engine
from config import settings
from models.requests import RetrieveRequest
from models.schemas.retrieval_result import HybridRetrievalResult
from services.retrieval import HybridRetrievalEngine, ScoringConfigError, resolve_config

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

logger = logging.getLogger(__name__)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "embedding_dim": settings.embedding_dim,
    }


@router.post("/retrieve", response_model=HybridRetrievalResult)
@limiter.limit(settings.rate_limit)
async def retrieve(
    request: Request,
    body: RetrieveRequest,
    engine: HybridRetrievalEngine = Depends(get_engine),
):
    if len(body.candidates) > settings.max_candidates:
        raise HTTPException(
            status_code=400,
            detail=f"Too many candidates. Max: {settings.max_candidates}",
        )

    try:
        config = resolve_config(body.config, base=engine.config)
        # CPU-bound scoring; keep it off the event loop
        return await run_in_threadpool(engine.retrieve, body.query, body.candidates, config)
    except ScoringConfigError as e:
        logger.info("Rejected retrieval request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
