from .prompts import build_review_prompt, GENERIC_PROMPT, GITLAB_PROMPT, THREADS_PROMPT
from .threads import normalize_threads

__all__ = ["build_review_prompt", "normalize_threads", "GENERIC_PROMPT", "GITLAB_PROMPT", "THREADS_PROMPT"]
