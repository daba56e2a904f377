"""Test container: every swappable component mocked unless asked otherwise."""

from dishka import AsyncContainer

from hub.util.di import COMPONENTS, Component
from hub.util.di.container import create_container


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container for tests.

    Mock providers register themselves by importing ``tests.di``, so this
    module must be imported through that package.

    Args:
        unmock: Components to run against their production implementation,
            e.g. ``{"persistence"}`` with a local postgres

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is named
    """
    unmock = unmock or set()
    unknown = unmock - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return create_container(mocked=COMPONENTS - unmock)
