# src/mr_reviewer/review/threads.py
import re
import logging
from pydantic import BaseModel, ValidationError
from mr_reviewer.errors import OutputParseError
from mr_reviewer.models.review import CommentThread, ReviewResult


logger = logging.getLogger(__name__)

FENCED_JSON = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


class ThreadDraft(BaseModel):
    """A thread as the model wrote it, before paths are checked and lines shifted."""
    new_line: int | None = None
    old_line: int | None = None
    new_path: str | None = None
    old_path: str | None = None
    body: str


class ThreadsAnswer(BaseModel):
    """JSON document the model is asked to answer with in threads mode."""
    comment: str
    threads: list[ThreadDraft] | None = None


def _strip_fence(text: str) -> str:
    """Unwrap an answer that is entirely wrapped in one ```json fence."""
    stripped = text.strip()
    match = FENCED_JSON.match(stripped)
    if match:
        return match.group(1)
    return stripped


def _shift_line(line: int | None) -> int | None:
    # Model counts lines from the hunk header; GitLab anchors are one further
    if line is not None and line > 0:
        return line + 1
    return line


def normalize_threads(raw: bytes | str) -> ReviewResult:
    """Parse a threads-mode answer and correct its line numbers.

    Threads without any file path cannot be anchored and are dropped with a
    warning; the rest of the answer is kept.
    """
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw

    try:
        answer = ThreadsAnswer.model_validate_json(_strip_fence(text))
    except ValidationError as e:
        raise OutputParseError(f"unmarshal model output failed: {e}, output: {text}", raw=text) from e

    threads = []
    for draft in answer.threads or []:
        if not draft.new_path and not draft.old_path:
            logger.warning(f"Dropping thread without file path: {draft.body[:100]!r}")
            continue

        threads.append(CommentThread(
            new_line=_shift_line(draft.new_line),
            old_line=_shift_line(draft.old_line),
            new_path=draft.new_path,
            old_path=draft.old_path,
            body=draft.body,
        ))

    file_level = sum(1 for thread in threads if thread.is_file_level)
    logger.info(f"Parsed {len(threads)} threads ({file_level} file-level)")

    return ReviewResult(comment=answer.comment, threads=threads)
