"""Application environment types.

Environments:
- DEVELOPMENT: Local development, console logs, notifier prints codes
- TESTING: Automated test execution against an isolated database
- CI: Continuous integration
- PRODUCTION: Secure cookies, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
