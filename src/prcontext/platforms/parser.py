"""Pull request address parsing.

Recognizes pull/merge request URLs from BitBucket Server, BitBucket Cloud,
GitHub and GitLab and reduces them to :class:`PullRequestParts`.

Rules are tried in a fixed order; the first rule whose marker appears in the
path decides the platform. Order matters: ``pull-requests`` also contains
``pull``, so BitBucket Cloud must be checked before GitHub.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urlsplit

from prcontext.contracts.exceptions import UnrecognizedAddressError
from prcontext.contracts.platform import Platform, PullRequestParts

_LOG = logging.getLogger(__name__)

# shape: http://localhost:7990/projects/PROJ/repos/repo/pull-requests/1/overview
_BITBUCKET_SERVER_RE = re.compile(r"(projects/\w+/repos/[\w\-_.]+)/pull-requests/(\d+)", re.ASCII)
# shape: https://gitlab.com/GROUP[/SUBGROUP]/PROJ/merge_requests/123
_GITLAB_RE = re.compile(r"/(.+)/merge_requests/(\d+)", re.ASCII)


def _extract_path(address: str) -> str | None:
    try:
        path = urlsplit(address).path
    except ValueError:
        return None
    return path or None


def _split_on_marker(path: str, marker: str) -> tuple[str, str] | None:
    """Return ``(repo, number)`` around ``/<marker>/``, or None if incomplete."""
    head, found, remainder = path.partition(f"/{marker}/")
    if not found:
        return None
    repo = head[1:]
    number = remainder.split("/", 1)[0]
    if not repo or not (number.isascii() and number.isdecimal()):
        return None
    return repo, number


def _parts(platform: Platform, split: tuple[str, str] | None) -> PullRequestParts | None:
    if split is None:
        return None
    repo, number = split
    return PullRequestParts(platform=platform, repo=repo, pull_request_number=number)


def parse_pull_request_url(address: str) -> PullRequestParts | None:
    """Parse *address* into its platform, repository and pull request number.

    Returns None for anything that is not a recognized pull request address,
    including strings that are not URLs at all.
    """
    path = _extract_path(address)
    if path is None:
        _LOG.debug("No path in address %r", address)
        return None

    server_match = _BITBUCKET_SERVER_RE.search(path)
    if server_match:
        return PullRequestParts(
            platform=Platform.BITBUCKET_SERVER,
            repo=server_match.group(1),
            pull_request_number=server_match.group(2),
        )

    # shape: https://bitbucket.org/proj/repo/pull-requests/1
    if "pull-requests" in path:
        return _parts(Platform.BITBUCKET_CLOUD, _split_on_marker(path, "pull-requests"))

    # shape: http://github.com/proj/repo/pull/1
    if "pull" in path:
        return _parts(Platform.GITHUB, _split_on_marker(path, "pull"))

    # Issues share the number space with pull requests on GitHub.
    # shape: http://github.com/proj/repo/issue/1
    if "issue" in path:
        return _parts(Platform.GITHUB, _split_on_marker(path, "issue"))

    if "merge_requests" in path:
        gitlab_match = _GITLAB_RE.search(path)
        if gitlab_match:
            return PullRequestParts(
                platform=Platform.GITLAB,
                repo=gitlab_match.group(1).removesuffix("/-"),
                pull_request_number=gitlab_match.group(2),
            )

    _LOG.debug("Address %r did not match any pull request shape", address)
    return None


def require_pull_request_url(address: str) -> PullRequestParts:
    """Like :func:`parse_pull_request_url` but raises for unrecognized input.

    Raises:
        UnrecognizedAddressError: If *address* is not a pull request URL.
    """
    parts = parse_pull_request_url(address)
    if parts is None:
        raise UnrecognizedAddressError(address)
    return parts
