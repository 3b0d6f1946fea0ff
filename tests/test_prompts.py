import pytest
from mr_reviewer.review.prompts import build_review_prompt, GENERIC_PROMPT


def test_build_prompt_layout():
    prompt = build_review_prompt(
        template="Review this.\n",
        title="Add retries",
        author="alice",
        description="Retries failed uploads",
        diff=b"--- a/main.py\n+++ b/main.py\n@@ -1 +1,2 @@\n+print('hello')",
    )

    assert prompt == (
        "Review this.\n"
        "\nTitle: Add retries\nAuthor: alice\n"
        "Description: Retries failed uploads\n"
        "# Diff\n```\n--- a/main.py\n+++ b/main.py\n@@ -1 +1,2 @@\n+print('hello')\n```\n"
    )


def test_build_prompt_omits_empty_description():
    prompt = build_review_prompt(
        template=GENERIC_PROMPT,
        title="Fix typo",
        author="bob",
        description="",
        diff=b"+x = 1",
    )

    assert "Description" not in prompt
    assert "Author: bob\n# Diff\n" in prompt


def test_build_prompt_is_deterministic():
    kwargs = dict(
        template=GENERIC_PROMPT,
        title="Refactor",
        author="carol",
        description="Split module",
        diff=b"+def f():\n+    return {}",
    )

    assert build_review_prompt(**kwargs) == build_review_prompt(**kwargs)


def test_build_prompt_keeps_diff_verbatim():
    diff = "+s = '{name}' % {'a': 1}\n-\t\tx = `cmd`\n+```\n"
    prompt = build_review_prompt(
        template="{template braces}",
        title="t",
        author="a",
        description="",
        diff=diff.encode(),
    )

    assert prompt.startswith("{template braces}")
    assert f"```\n{diff}\n```\n" in prompt


def test_build_prompt_accepts_text_diff():
    from_bytes = build_review_prompt("p", "t", "a", "d", b"+x = 1")
    from_text = build_review_prompt("p", "t", "a", "d", "+x = 1")

    assert from_bytes == from_text
