"""Exception types raised by the engine."""

from __future__ import annotations


class EngineError(Exception):
    """Base class for every error the engine reports."""


class AssetNotFoundError(EngineError, FileNotFoundError):
    """A file the engine needs could not be opened."""


class InvalidDataError(EngineError, ValueError):
    """A file was read but its contents could not be understood."""


class InitFailedError(EngineError, RuntimeError):
    """A subsystem could not be brought up."""