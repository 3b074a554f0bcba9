"""CI source implementations and factory."""

from prcontext.ci.factory import CI_SOURCES, create_ci_source, detect_ci_source, register_ci_source
from prcontext.ci.github_actions import UNSET, GitHubActions

__all__ = ["CI_SOURCES", "UNSET", "GitHubActions", "create_ci_source", "detect_ci_source", "register_ci_source"]
