"""Hosting platform contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Platform(StrEnum):
    """Code-hosting platforms whose pull request addresses are recognized."""

    BITBUCKET_SERVER = "BitBucketServer"
    BITBUCKET_CLOUD = "BitBucketCloud"
    GITHUB = "GitHub"
    GITLAB = "GitLab"


class PullRequestParts(BaseModel):
    """Normalized pull/merge request address.

    ``repo`` is an opaque, platform-specific path (``projects/P/repos/R`` on
    BitBucket Server, ``group/subgroup/project`` on GitLab, ``owner/repo``
    elsewhere). ``pull_request_number`` keeps the digits exactly as they
    appeared in the address.
    """

    platform: Platform
    repo: str
    pull_request_number: str

    model_config = {"frozen": True}
