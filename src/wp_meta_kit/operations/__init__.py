"""Operations module for wp-meta-kit.

This module contains helpers that build on the REST client.
"""

from .streaming import stream_records

__all__ = ["stream_records"]
