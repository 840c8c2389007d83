"""Presenter implementations for output handling."""

from .console_presenter import ConsolePresenter

__all__ = ["ConsolePresenter"]
