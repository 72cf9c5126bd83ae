"""
Security limits and validation for steamacf.
This module provides limit checks to prevent resource exhaustion while reading.
"""

from typing import TYPE_CHECKING, Optional

from ..utils.config import ParseLimits
from .exceptions import LimitExceededError

if TYPE_CHECKING:
    from ..streaming.reader import Position


class LimitValidator:
    """Validates reading limits to prevent resource exhaustion attacks."""

    def __init__(self, limits: Optional[ParseLimits] = None):
        self.limits = limits or ParseLimits()
        self.nesting_depth = 0

    def validate_string_length(
        self, length: int, position: Optional["Position"] = None
    ) -> None:
        """Validate that a string literal is within the length limit."""
        if length > self.limits.max_string_length:
            raise LimitExceededError(
                "String length", length, self.limits.max_string_length, position
            )

    def enter_structure(self, position: Optional["Position"] = None) -> None:
        """Track entering a nested dictionary and validate depth."""
        self.nesting_depth += 1
        if self.nesting_depth > self.limits.max_nesting_depth:
            raise LimitExceededError(
                "Nesting depth",
                self.nesting_depth,
                self.limits.max_nesting_depth,
                position,
            )

    def exit_structure(self) -> None:
        """Track leaving a nested dictionary."""
        if self.nesting_depth > 0:
            self.nesting_depth -= 1
