# src/mr_reviewer/review/engine.py
import logging
from collections.abc import Mapping
from mr_reviewer.config import merge_vars, resolve_provider_config, threads_defaults
from mr_reviewer.models.config import ProviderKind
from mr_reviewer.models.review import ReviewRequest, ReviewResult
from mr_reviewer.providers import DEFAULT_TIMEOUT, get_provider
from .prompts import build_review_prompt
from .threads import normalize_threads


logger = logging.getLogger(__name__)


class ReviewEngine:
    def __init__(self, timeout: float = DEFAULT_TIMEOUT, base_vars: Mapping[str, str] | None = None):
        self.timeout = timeout
        self.base_vars = dict(base_vars or {})

    async def review(
        self,
        request: ReviewRequest,
        kind: ProviderKind,
        threads: bool = False,
    ) -> ReviewResult:
        """Run one review call against a single provider.

        Any failure is raised as a ReviewError subclass; there is no partial
        result and no retry.
        """
        vars = merge_vars(self.base_vars, request.vars)
        defaults = threads_defaults(kind) if threads else None
        config = resolve_provider_config(vars, kind, defaults)

        prompt = build_review_prompt(
            template=config.prompt,
            title=request.title,
            author=request.author,
            description=request.description,
            diff=request.diff,
        )

        provider = get_provider(kind, config, timeout=self.timeout)
        logger.info(f"Reviewing '{request.title}' with {kind.value} ({config.model}), prompt {len(prompt)} chars")

        text = await provider.submit(prompt)

        if threads:
            result = normalize_threads(text)
            logger.info(f"Review completed with {len(result.threads or [])} threads")
            return result

        logger.info("Review completed")
        return ReviewResult(comment=text)
