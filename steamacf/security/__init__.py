"""
steamacf Errors and Limits.

This module provides the exception hierarchy and reading limits.
"""

from .exceptions import AcfError, ParseError, StreamError
from .limits import LimitValidator

__all__ = ['AcfError', 'ParseError', 'StreamError', 'LimitValidator']
