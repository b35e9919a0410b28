"""Exceptions raised by the equation solver core."""

from __future__ import annotations


class EquationError(ValueError):
    """Base exception for equation solver failures."""


class InvalidSystemError(EquationError):
    """Raised when an augmented matrix is not shaped ``n x (n+1)``."""


class SingularSystemError(EquationError):
    """Raised when elimination meets a pivot below tolerance."""


class InvalidLeadingCoefficientError(EquationError):
    """Raised when a polynomial's leading coefficient is zero."""


class EquationOverflowError(EquationError):
    """Raised when a root or solution leaves the range of finite floats."""


__all__ = [
    "EquationError",
    "EquationOverflowError",
    "InvalidLeadingCoefficientError",
    "InvalidSystemError",
    "SingularSystemError",
]
