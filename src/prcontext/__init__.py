"""Public API surface for prcontext."""

from prcontext.auth import EnvTokenResolver, TokenResolver, TokenSource
from prcontext.ci import GitHubActions, create_ci_source, detect_ci_source, register_ci_source
from prcontext.contracts.ci_source import CISource, PullRequestContext
from prcontext.contracts.exceptions import (
    AuthenticationError,
    CISourceError,
    ConfigError,
    EventLoadError,
    InvalidCIStateError,
    PRContextError,
    UnrecognizedAddressError,
)
from prcontext.contracts.platform import Platform, PullRequestParts
from prcontext.platforms import parse_pull_request_url, require_pull_request_url

__all__ = [
    "AuthenticationError",
    "CISource",
    "CISourceError",
    "ConfigError",
    "EnvTokenResolver",
    "EventLoadError",
    "GitHubActions",
    "InvalidCIStateError",
    "PRContextError",
    "Platform",
    "PullRequestContext",
    "PullRequestParts",
    "TokenResolver",
    "TokenSource",
    "UnrecognizedAddressError",
    "create_ci_source",
    "detect_ci_source",
    "parse_pull_request_url",
    "register_ci_source",
    "require_pull_request_url",
]
