"""CI source registry and selection.

Decouples CI source selection from the concrete providers. Callers either name
a source explicitly or let :func:`detect_ci_source` probe the environment.
"""

from __future__ import annotations

import logging

from prcontext.ci.github_actions import GitHubActions
from prcontext.contracts.ci_source import CISource, Env
from prcontext.contracts.exceptions import ConfigError

_LOG = logging.getLogger(__name__)

# Probed in insertion order by detect_ci_source
CI_SOURCES: dict[str, type[CISource]] = {
    "github-actions": GitHubActions,
}


def register_ci_source(name: str, source_cls: type[CISource]) -> None:
    """Register a CI source class by name.

    Args:
        name: Stable selector (e.g. ``"github-actions"``).
        source_cls: Class implementing the :class:`CISource` ABC.
    """
    CI_SOURCES[name] = source_cls


def create_ci_source(name: str, env: Env, **kwargs: object) -> CISource:
    """Build the CI source registered under *name*.

    Raises:
        ConfigError: If no source is registered under *name*.
        TypeError: If *kwargs* holds a keyword the source does not accept.
        EventLoadError: If the source's event payload cannot be loaded.
    """
    source_cls = CI_SOURCES.get(name)
    if source_cls is None:
        available = ", ".join(sorted(CI_SOURCES)) or "(none registered)"
        raise ConfigError(f"Unknown CI source: {name!r}. Available: {available}")
    return source_cls.from_env(env, **kwargs)


def detect_ci_source(env: Env) -> CISource | None:
    """Return the first registered CI source whose required variables are set.

    Only the matching source loads its event payload.
    """
    for name, source_cls in CI_SOURCES.items():
        if source_cls.matches_env(env):
            _LOG.debug("Detected CI source %s", name)
            return source_cls.from_env(env)
    _LOG.debug("No CI source matched the environment")
    return None
