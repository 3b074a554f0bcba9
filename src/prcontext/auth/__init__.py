"""Auth module public exports."""

from prcontext.auth.base import TokenResolver
from prcontext.auth.resolvers.env import EnvTokenResolver, TokenSource

__all__ = ["EnvTokenResolver", "TokenResolver", "TokenSource"]
