"""Shared fixtures for the texttrimmer test suite."""

import os

import pytest

from texttrimmer.config import ENV_OVERRIDES


@pytest.fixture(autouse=True)
def clean_env():
    """Keep TEXTTRIMMER_* variables from the shell or .env files out of tests."""
    names = [env_var for env_var, _, _ in ENV_OVERRIDES]
    saved = {name: os.environ.pop(name) for name in names if name in os.environ}
    yield
    for name in names:
        os.environ.pop(name, None)
    os.environ.update(saved)
