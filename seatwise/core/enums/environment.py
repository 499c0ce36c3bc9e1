"""Deployment environments recognised by Settings."""

from enum import Enum


class Environment(str, Enum):
    """Where the booking engine runs.

    DEVELOPMENT renders colored console logs; TESTING and CI render JSON so
    test output can be parsed; PRODUCTION also logs JSON.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
