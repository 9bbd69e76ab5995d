from typing import Callable
from unittest.mock import Mock

import pytest

from demand_scene import Options, parse_options

PROGRAM = "DemandPbrtScene"


@pytest.fixture
def usage() -> Mock:
    """Diagnostic callback double recording every report."""
    return Mock(return_value=None)


@pytest.fixture
def get_options(usage: Mock) -> Callable[..., Options]:
    """Parse the given arguments after the program name."""

    def _get_options(*args: str) -> Options:
        return parse_options([PROGRAM, *args], usage)

    return _get_options


def assert_reported(usage: Mock, message: str) -> None:
    """Assert the callback was called exactly once, with ``message``.

    Args:
        usage: The callback double.
        message: Expected diagnostic.
    Raises:
        AssertionError: If there were other reports or none at all.
    """
    usage.assert_called_once_with(PROGRAM, message)
