"""Test configuration and fixtures for the user management service."""

from tests.fixtures import *  # noqa: F401,F403
