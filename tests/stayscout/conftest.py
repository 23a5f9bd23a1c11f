"""
Shared fixtures for stayscout tests.
"""

import os
import sys

import pytest

_here = os.path.dirname(__file__)
_scripts_dir = os.path.join(_here, "..", "..", "scripts")
if _scripts_dir not in sys.path:
    sys.path.insert(0, _scripts_dir)
if _here not in sys.path:
    sys.path.insert(0, _here)

from fakes import FAST_TIMING, FakeDriver, SessionRecorder  # noqa: E402


@pytest.fixture
def fast_timing():
    return FAST_TIMING


@pytest.fixture
def fake_driver():
    return FakeDriver()


@pytest.fixture
def session(fake_driver):
    return SessionRecorder(fake_driver)
