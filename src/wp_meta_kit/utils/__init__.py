"""Utility modules for wp-meta-kit."""

from .notices import ERROR_MESSAGES, render_error, render_summary

__all__ = ["ERROR_MESSAGES", "render_error", "render_summary"]
