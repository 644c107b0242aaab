"""Dependency injection."""

from stakeops.di.container import DIContainer

__all__ = ["DIContainer"]
