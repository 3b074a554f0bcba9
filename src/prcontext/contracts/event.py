"""Webhook event payload models delivered by GitHub Actions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EventRepository(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    full_name: str | None = None


class EventRef(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    repo: EventRepository | None = None


class EventPullRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    number: int | str | None = None
    base: EventRef | None = None


class EventIssue(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    number: int | str | None = None


class GitHubEvent(BaseModel):
    """The subset of a workflow event payload used to locate the pull request.

    Every field is optional; ``null`` sub-objects are treated as absent.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    pull_request: EventPullRequest | None = None
    issue: EventIssue | None = None
    repository: EventRepository | None = None
