"""Core enums package.

Usage:
    from blindgate.core.enums import ErrorCode, Environment
"""

from blindgate.core.enums.environment import Environment
from blindgate.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
