"""Configuration for the bean graph builder."""

from .settings import BuilderSettings

__all__ = ["BuilderSettings"]
