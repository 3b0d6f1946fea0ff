# src/mr_reviewer/main.py
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from fastapi import FastAPI, HTTPException
from pydantic import Base64Bytes, BaseModel, Field

from mr_reviewer.config import Settings, load_vars_file
from mr_reviewer.errors import ConfigurationError, ReviewError
from mr_reviewer.models.config import ProviderKind
from mr_reviewer.models.review import ReviewRequest, ReviewResult
from mr_reviewer.review.engine import ReviewEngine


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info(f"MR Reviewer starting, default provider: {settings.provider.value}")
    yield
    logger.info("MR Reviewer shutting down...")


app = FastAPI(title="MR Reviewer", lifespan=lifespan)


class ReviewInput(BaseModel):
    """Invocation payload; `diffs` is base64, the JSON encoding of raw bytes."""
    title: str
    description: str = ""
    author: str = ""
    diffs: Base64Bytes = b""
    vars: dict[str, str] = Field(default_factory=dict)

    def to_request(self) -> ReviewRequest:
        return ReviewRequest(
            title=self.title,
            description=self.description,
            author=self.author,
            diff=self.diffs,
            vars=self.vars,
        )


def get_engine(settings: Settings) -> ReviewEngine:
    return ReviewEngine(
        timeout=settings.request_timeout,
        base_vars=load_vars_file(settings.vars_file),
    )


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}


async def run_review(payload: ReviewInput, kind: ProviderKind, threads: bool) -> ReviewResult:
    engine = get_engine(get_settings())
    try:
        return await engine.review(payload.to_request(), kind=kind, threads=threads)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ReviewError as e:
        logger.error(f"Review failed with {kind.value}: {e}")
        raise HTTPException(status_code=502, detail=str(e))


@app.post("/review", response_model=ReviewResult, response_model_exclude_none=True)
async def review_default(payload: ReviewInput, threads: bool | None = None):
    settings = get_settings()
    return await run_review(
        payload,
        kind=settings.provider,
        threads=settings.threads if threads is None else threads,
    )


@app.post("/review/{provider}", response_model=ReviewResult, response_model_exclude_none=True)
async def review_with(provider: ProviderKind, payload: ReviewInput, threads: bool | None = None):
    settings = get_settings()
    return await run_review(
        payload,
        kind=provider,
        threads=settings.threads if threads is None else threads,
    )
