"""Shared test fixtures for prcontext tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

_CI_ENV_KEYS = (
    "GITHUB_WORKFLOW",
    "GITHUB_EVENT_PATH",
    "GITHUB_TOKEN",
    "DANGER_GITHUB_API_TOKEN",
)


@pytest.fixture
def clean_ci_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CI variables inherited from the machine running the tests."""
    for key in _CI_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def pull_request_event() -> dict[str, Any]:
    """A trimmed ``pull_request`` webhook payload."""
    return {
        "action": "opened",
        "number": 42,
        "pull_request": {
            "number": 42,
            "title": "Add prcontext",
            "base": {"ref": "main", "repo": {"full_name": "octo/base-repo"}},
            "head": {"ref": "feature", "repo": {"full_name": "fork/base-repo"}},
        },
        "repository": {"full_name": "octo/base-repo"},
    }


@pytest.fixture
def issue_comment_event() -> dict[str, Any]:
    """A trimmed ``issue_comment`` webhook payload."""
    return {
        "action": "created",
        "issue": {"number": 7, "pull_request": {"url": "https://api.github.com/repos/octo/repo/pulls/7"}},
        "comment": {"body": "please review"},
        "repository": {"full_name": "octo/repo"},
    }


@pytest.fixture
def write_event(tmp_path: Path):
    """Write a payload to an event file and return its path."""

    def _write(payload: Any, *, name: str = "event.json") -> Path:
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
