"""
Shared helpers for polyseq.
"""

from polyseq.utils.logging import get_logger

__all__ = [
    "get_logger",
]
