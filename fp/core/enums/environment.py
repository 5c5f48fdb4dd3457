"""Runtime environment types.

Used by Settings to select logging output:
- DEVELOPMENT: human-readable console logs
- TESTING: JSON logs for test runs
- CI: JSON logs for continuous integration
- PRODUCTION: JSON logs for log aggregation
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
