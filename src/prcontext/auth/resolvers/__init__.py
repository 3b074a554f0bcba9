"""Concrete token resolvers."""

from prcontext.auth.resolvers.env import EnvTokenResolver, TokenSource

__all__ = ["EnvTokenResolver", "TokenSource"]
