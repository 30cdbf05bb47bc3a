"""Application environment types.

Environments:
- DEVELOPMENT: Local development, human-readable logs, stub mail transport
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Real mail transport and payment gateway
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
