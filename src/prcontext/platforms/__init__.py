"""Pull request address parsing."""

from prcontext.platforms.parser import parse_pull_request_url, require_pull_request_url

__all__ = ["parse_pull_request_url", "require_pull_request_url"]
