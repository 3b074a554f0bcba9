"""Public contracts for prcontext."""

from prcontext.contracts.ci_source import CISource, Env, PullRequestContext, ensure_env_keys_exist
from prcontext.contracts.event import EventIssue, EventPullRequest, EventRef, EventRepository, GitHubEvent
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

__all__ = [
    "AuthenticationError",
    "CISource",
    "CISourceError",
    "ConfigError",
    "Env",
    "EventIssue",
    "EventLoadError",
    "EventPullRequest",
    "EventRef",
    "EventRepository",
    "GitHubEvent",
    "InvalidCIStateError",
    "PRContextError",
    "Platform",
    "PullRequestContext",
    "PullRequestParts",
    "UnrecognizedAddressError",
    "ensure_env_keys_exist",
]
