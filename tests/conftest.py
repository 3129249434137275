"""
Pytest configuration and fixtures for blurhash_encoder tests
"""

import os

import pytest

from blurhash_encoder import reload_settings
from tests.helpers import make_gradient


@pytest.fixture
def gradient():
    """A 16x12 gradient image as (pixels, width, height)"""
    return make_gradient(16, 12), 16, 12


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from BLURHASH_* variables in the environment"""
    for key in list(os.environ):
        if key.startswith("BLURHASH_"):
            monkeypatch.delenv(key)
    reload_settings()
    yield
    monkeypatch.undo()
    reload_settings()
