"""Environment token resolver."""

from __future__ import annotations

import logging
from enum import StrEnum

from prcontext.auth.base import TokenResolver
from prcontext.contracts.ci_source import Env
from prcontext.contracts.exceptions import AuthenticationError

_LOG = logging.getLogger(__name__)


class TokenSource(StrEnum):
    """Which convention supplied the review token."""

    PERSONAL = "DANGER_GITHUB_API_TOKEN"
    PLATFORM = "GITHUB_TOKEN"


class EnvTokenResolver(TokenResolver):
    """Pick the review token from the environment.

    The personal token wins over the platform token: comments authored with
    the automatic workflow token cannot be updated by later runs.
    """

    # Highest priority first
    order: tuple[TokenSource, ...] = (TokenSource.PERSONAL, TokenSource.PLATFORM)

    def __init__(self, env: Env) -> None:
        self._env = env

    @property
    def source(self) -> TokenSource | None:
        for candidate in self.order:
            if (self._env.get(candidate.value) or "").strip():
                return candidate
        return None

    def resolve(self) -> str:
        source = self.source
        if source is None:
            names = " or ".join(candidate.value for candidate in self.order)
            raise AuthenticationError(f"{names} is not set or empty")
        _LOG.debug("Using review token from %s", source.value)
        return self._env[source.value].strip()
