# tests/test_models.py
import pytest
from pydantic import ValidationError
from mr_reviewer.models.config import ProviderConfig, ProviderKind
from mr_reviewer.models.review import CommentThread, ReviewRequest, ReviewResult


def test_provider_kind_var_prefix():
    assert ProviderKind.OPENAI.var_prefix == "reviewer_"
    assert ProviderKind.CLAUDE.var_prefix == "claude_reviewer_"
    assert ProviderKind.DEEPSEEK.var_prefix == "deepseek_reviewer_"
    assert ProviderKind.GEMINI.var_prefix == "gemini_reviewer_"


def test_review_request_is_frozen():
    request = ReviewRequest(title="t", diff=b"+x")
    assert request.description == ""
    assert request.vars == {}

    with pytest.raises(ValidationError):
        request.title = "other"


def test_provider_config_is_frozen():
    config = ProviderConfig(
        kind=ProviderKind.GEMINI,
        api_key="k",
        model="m",
        prompt="p",
        endpoint="https://example.com/",
    )
    assert config.max_tokens is None

    with pytest.raises(ValidationError):
        config.model = "other"


def test_comment_thread_requires_a_path():
    with pytest.raises(ValidationError):
        CommentThread(new_line=3, body="no path")


def test_comment_thread_file_level():
    thread = CommentThread(new_path="a.go", body="whole file")
    assert thread.is_file_level is True

    thread = CommentThread(old_path="a.go", old_line=7, body="removed line")
    assert thread.is_file_level is False


def test_review_result_dump_omits_absent_fields():
    result = ReviewResult(
        comment="ok",
        threads=[CommentThread(new_line=10, new_path="a.go", body="fix")],
    )

    assert result.model_dump(exclude_none=True) == {
        "comment": "ok",
        "threads": [{"new_line": 10, "new_path": "a.go", "body": "fix"}],
    }
    assert ReviewResult(comment="LGTM").model_dump(exclude_none=True) == {"comment": "LGTM"}
