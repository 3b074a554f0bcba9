"""GitHub Actions CI source.

GitHub Actions writes the webhook payload that triggered a workflow to the file
named by ``GITHUB_EVENT_PATH``. Pull request runs carry ``pull_request``,
comment-triggered runs carry ``issue``, and every other event carries at least
``repository``. Runs with neither ``pull_request`` nor ``issue`` are handed to
the event DSL instead of the pull request path.

Review tokens: the automatic ``GITHUB_TOKEN`` posts as the ``github-actions``
app user. A personal token may be supplied as ``DANGER_GITHUB_API_TOKEN``; it
must not be a copy of the automatic token, otherwise existing comments are
never updated and a new one is created on every run. See
:class:`prcontext.auth.EnvTokenResolver`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, ClassVar

from pydantic import ValidationError

from prcontext.contracts.ci_source import CISource, Env, ensure_env_keys_exist
from prcontext.contracts.event import GitHubEvent
from prcontext.contracts.exceptions import EventLoadError, InvalidCIStateError

_LOG = logging.getLogger(__name__)


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def _coerce_event(event: GitHubEvent | dict[str, Any] | None, *, path: str | None = None) -> GitHubEvent | None:
    if event is None or isinstance(event, GitHubEvent):
        return event
    if not isinstance(event, dict):
        raise EventLoadError(f"event payload must be a JSON object, got {type(event).__name__}", path=path)
    try:
        return GitHubEvent.model_validate(event)
    except ValidationError as exc:
        raise EventLoadError(f"event payload has unexpected shape: {exc}", path=path) from exc


class GitHubActions(CISource):
    """CI source for GitHub Actions workflow runs.

    ``is_pr`` is always True: workflows run on many event types and a pull
    request cannot be told apart from the environment alone. Callers should
    confirm with :meth:`pull_request_context` before acting on a PR.
    """

    required_env_keys: ClassVar[tuple[str, ...]] = ("GITHUB_WORKFLOW",)
    event_path_env: ClassVar[str] = "GITHUB_EVENT_PATH"
    default_event_path: ClassVar[Path] = Path("/github/workflow/event.json")

    def __init__(self, env: Env, event: GitHubEvent | None = None) -> None:
        self._env = env
        self._event = event

    @classmethod
    def from_env(cls, env: Env, event: GitHubEvent | dict[str, Any] | None = UNSET) -> GitHubActions:
        """Build the source, reading the event payload file unless *event* is given.

        An explicitly passed *event*, including ``{}`` or ``None``, is used as is
        and no file is touched.

        Raises:
            EventLoadError: If the event file exists but cannot be read or parsed.
        """
        if event is not UNSET:
            return cls(env, _coerce_event(event))
        return cls(env, cls.load_event(env))

    @classmethod
    def event_path(cls, env: Env) -> Path:
        configured = (env.get(cls.event_path_env) or "").strip()
        _LOG.debug("%s = %s", cls.event_path_env, configured or "(unset)")
        return Path(configured) if configured else cls.default_event_path

    @classmethod
    def load_event(cls, env: Env) -> GitHubEvent | None:
        path = cls.event_path(env)
        if not path.exists():
            _LOG.debug("No event file at %s", path)
            return None
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise EventLoadError(f"failed reading event file: {path}", path=str(path)) from exc
        except json.JSONDecodeError as exc:
            raise EventLoadError(f"invalid JSON in event file: {path}", path=str(path)) from exc
        _LOG.debug("Loaded event file %s", path)
        return _coerce_event(payload, path=str(path))

    @property
    def env(self) -> Env:
        return self._env

    @property
    def event(self) -> GitHubEvent | None:
        return self._event

    @property
    def name(self) -> str:
        return "GitHub Actions"

    @property
    def is_ci(self) -> bool:
        result = ensure_env_keys_exist(self._env, self.required_env_keys)
        _LOG.debug("is_ci = %s", result)
        return result

    @property
    def is_pr(self) -> bool:
        return True

    @property
    def use_event_dsl(self) -> bool:
        event = self._event
        result = event is None or (event.pull_request is None and event.issue is None)
        _LOG.debug("use_event_dsl = %s", result)
        return result

    @property
    def pull_request_id(self) -> str:
        event = self._event
        if event is not None:
            if event.pull_request is not None and event.pull_request.number is not None:
                _LOG.debug("pull_request_id from pull_request: %s", event.pull_request.number)
                return str(event.pull_request.number)
            if event.issue is not None and event.issue.number is not None:
                _LOG.debug("pull_request_id from issue: %s", event.issue.number)
                return str(event.issue.number)
        raise InvalidCIStateError(
            f"pull_request_id was called on {self.name} when it wasn't a PR",
            accessor="pull_request_id",
        )

    @property
    def repo_slug(self) -> str:
        event = self._event
        if event is not None:
            pull_request = event.pull_request
            if pull_request is not None and pull_request.base is not None and pull_request.base.repo is not None:
                full_name = pull_request.base.repo.full_name
                if full_name:
                    return full_name
            if event.repository is not None and event.repository.full_name:
                return event.repository.full_name
        raise InvalidCIStateError(
            f"repo_slug was called on {self.name} when it wasn't a PR",
            accessor="repo_slug",
        )
