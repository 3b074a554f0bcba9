"""CI source contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import ClassVar

from pydantic import BaseModel

from prcontext.contracts.exceptions import InvalidCIStateError

Env = Mapping[str, str]


class PullRequestContext(BaseModel):
    """Repository slug and pull request identifier for the current run."""

    repo_slug: str
    pull_request_id: str

    model_config = {"frozen": True}


def ensure_env_keys_exist(env: Env, keys: tuple[str, ...] | list[str]) -> bool:
    """Return True when every key in *keys* is set to a non-empty value."""
    return all(env.get(key) for key in keys)


class CISource(ABC):
    """A CI provider's view of the current run.

    Implementations are plain data holders over an environment snapshot and,
    where the provider delivers one, an already-loaded event payload. The
    properties never perform I/O. Loading belongs to :meth:`from_env`.
    """

    required_env_keys: ClassVar[tuple[str, ...]] = ()

    @classmethod
    @abstractmethod
    def from_env(cls, env: Env, **kwargs: object) -> CISource:
        """Build the source from *env*, loading any provider event payload.

        Raises:
            EventLoadError: If a present event payload cannot be parsed.
        """

    @classmethod
    def matches_env(cls, env: Env) -> bool:
        """Cheap probe used for detection; does not load the event payload."""
        return ensure_env_keys_exist(env, cls.required_env_keys)

    @property
    @abstractmethod
    def name(self) -> str: ...  # pragma: no cover

    @property
    @abstractmethod
    def is_ci(self) -> bool: ...  # pragma: no cover

    @property
    @abstractmethod
    def is_pr(self) -> bool:
        """Whether the run is associated with a pull/merge request.

        Providers that cannot cheaply tell PR runs apart may return True
        unconditionally and must say so in their docstring.
        """

    @property
    @abstractmethod
    def use_event_dsl(self) -> bool: ...  # pragma: no cover

    @property
    @abstractmethod
    def pull_request_id(self) -> str:
        """Pull request number as a string.

        Raises:
            InvalidCIStateError: If the run is not pull-request shaped.
        """

    @property
    @abstractmethod
    def repo_slug(self) -> str:
        """Repository slug (``owner/repo``).

        Raises:
            InvalidCIStateError: If the run carries no repository information.
        """

    def pull_request_context(self) -> PullRequestContext | None:
        """Return the PR context, or None when the run is not PR shaped."""
        try:
            return PullRequestContext(repo_slug=self.repo_slug, pull_request_id=self.pull_request_id)
        except InvalidCIStateError:
            return None
