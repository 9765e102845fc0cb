"""Pytest configuration"""

import io
import logging

import pytest

from termlaunch.adapters import (
    DEFAULT_PROFILE_UUID,
    Profile,
    ProfileList,
    SequentialFdTransport,
    StaticSettings,
)
from termlaunch.options import parse_options
from termlaunch.plan import PlanBuilder
from termlaunch.telemetry import Diagnostics, metrics

WORK_UUID = "5a0e3f5e-7c2b-4f3e-9d8a-2b7c1e4f6a10"
DUP_UUID_1 = "0f4b1c1e-1111-4aaa-8bbb-000000000001"
DUP_UUID_2 = "0f4b1c1e-2222-4aaa-8bbb-000000000002"


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics around every test"""
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging after every test"""
    yield
    logger = logging.getLogger("termlaunch")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def profiles():
    """Default profile, "Work" and two profiles sharing the name "Dup" """
    return ProfileList(
        [
            Profile(uuid=DEFAULT_PROFILE_UUID, name="Default"),
            Profile(uuid=WORK_UUID, name="Work"),
            Profile(uuid=DUP_UUID_1, name="Dup"),
            Profile(uuid=DUP_UUID_2, name="Dup"),
        ],
        default_uuid=DEFAULT_PROFILE_UUID,
    )


@pytest.fixture
def diagnostics():
    """Diagnostics writing into a buffer"""
    return Diagnostics(stream=io.StringIO())


@pytest.fixture
def builder(profiles, diagnostics):
    """Builder with an index-only FD transport and window mode"""
    return PlanBuilder(
        profiles,
        diagnostics=diagnostics,
        fd_transport_factory=SequentialFdTransport,
        new_terminal_mode="window",
    )


@pytest.fixture
def parse(profiles, diagnostics):
    """parse_options with test collaborators and an empty environment"""

    def _parse(argv, environ=None, mode="window"):
        return parse_options(
            argv,
            profiles=profiles,
            settings=StaticSettings(mode),
            environ=environ if environ is not None else {},
            diagnostics=diagnostics,
            fd_transport_factory=SequentialFdTransport,
            cwd="/home/user",
        )

    return _parse


@pytest.fixture
def work_uuid():
    return WORK_UUID
