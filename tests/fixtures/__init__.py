"""Reusable fixtures for tests."""

from .scripted_process import LOCK_ERROR_OUTPUT, VERSION_OUTPUT, ScriptedProcess  # noqa: F401

__all__ = [
    "LOCK_ERROR_OUTPUT",
    "VERSION_OUTPUT",
    "ScriptedProcess",
]
