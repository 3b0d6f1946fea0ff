# tests/e2e/test_real_providers.py
"""
End-to-end tests for LLM providers with real API calls.

These tests require valid API credentials set in environment variables:
- REVIEWER_API_KEY: OpenAI API key
- CLAUDE_REVIEWER_API_KEY: Anthropic API key
- DEEPSEEK_REVIEWER_API_KEY: DeepSeek API key
- GEMINI_REVIEWER_API_KEY: Google Gemini API key
Model overrides (e.g. GEMINI_REVIEWER_MODEL) are picked up the same way.

Run with: pytest tests/e2e/ -m e2e -v
"""
import os
import pytest
from mr_reviewer.models.config import ProviderKind
from mr_reviewer.models.review import ReviewRequest
from mr_reviewer.review.engine import ReviewEngine


SIMPLE_DIFF = b"""--- /dev/null
+++ b/math.py
@@ -0,0 +1,2 @@
+def add(a, b):
+    return a - b
"""


def _vars_from_env(kind: ProviderKind) -> dict[str, str]:
    prefix = kind.var_prefix.upper()
    return {
        name.lower(): value
        for name, value in os.environ.items()
        if name.startswith(prefix)
    }


@pytest.mark.e2e
@pytest.mark.asyncio
@pytest.mark.parametrize("kind", list(ProviderKind))
@pytest.mark.parametrize("threads", [False, True])
async def test_real_review(kind, threads):
    """Test each provider with a real API call."""
    vars = _vars_from_env(kind)
    if f"{kind.var_prefix}api_key" not in vars:
        pytest.skip(f"{kind.var_prefix.upper()}API_KEY not set")

    request = ReviewRequest(
        title="Add math helper",
        author="e2e",
        diff=SIMPLE_DIFF,
        vars=vars,
    )

    result = await ReviewEngine().review(request, kind, threads=threads)

    assert result.comment
    if threads:
        assert isinstance(result.threads, list)
    print(f"\n{kind.value} comment: {result.comment[:200]}")
    print(f"{kind.value} threads: {len(result.threads or [])}")
