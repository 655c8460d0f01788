"""
Type definitions used across layers
"""

from enum import StrEnum


class Environment(StrEnum):
    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"

    @property
    def is_restricted(self) -> bool:
        """Production deployments (serverless) cannot rely on writes to the filesystem surviving."""
        return self is Environment.PRODUCTION
