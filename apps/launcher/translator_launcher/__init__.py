"""Transparent launcher for the installed i18n-translator binary."""

from .launcher import launch, spawn

__all__ = ["launch", "spawn"]
