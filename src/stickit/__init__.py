"""Stick It bulletin board web application."""

from .api import app

__all__ = ["app"]
