"""
Calculator tool set.

Plain functions with no shared state. The MCP server registers them as
tools (see registry.py); nothing here knows about the protocol.
"""

import logging
from typing import Annotated

from pydantic import Field

logger = logging.getLogger(__name__)

DIVIDE_BY_ZERO_MESSAGE = "Cannot divide by zero"

# Signed 64-bit range accepted by is_prime
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class DivideByZeroError(ZeroDivisionError):
    """Raised by divide() when the divisor is zero."""

    def __init__(self, message: str = DIVIDE_BY_ZERO_MESSAGE):
        super().__init__(message)


def add(a: float, b: float) -> float:
    logger.debug("add(%r, %r)", a, b)
    return a + b


def subtract(a: float, b: float) -> float:
    logger.debug("subtract(%r, %r)", a, b)
    return a - b


def multiply(a: float, b: float) -> float:
    logger.debug("multiply(%r, %r)", a, b)
    return a * b


def divide(a: float, b: float) -> float:
    """Divide a by b. Raises DivideByZeroError when b is zero (either sign)."""
    logger.debug("divide(%r, %r)", a, b)
    if b == 0:
        logger.warning("divide called with zero divisor (a=%r)", a)
        raise DivideByZeroError()
    return a / b


def is_prime(n: Int64) -> bool:
    """
    Check whether n is a prime number.

    Trial division by candidates of the form 6k ± 1. The bound is checked
    as i * i <= n on integers, so no float square root is involved and the
    result stays exact up to the int64 limit.
    """
    logger.debug("is_prime(%r)", n)
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True
