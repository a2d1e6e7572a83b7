"""Pytest configuration and shared fixtures for the doxy2md test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import pytest

from doxy2md.options import RendererOptions
from doxy2md.permalinks import StaticPermalinkResolver
from doxy2md.renderers.base import RenderContext
from doxy2md.renderers.dispatch import RenderDispatcher, create_dispatcher

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def resolver() -> StaticPermalinkResolver:
    """Provide a resolver knowing a class page, a file page and the todo page.

    Returns
    -------
    StaticPermalinkResolver
        Resolver with ``classfoo``, ``foo_8h`` and ``todo`` registered

    """
    return StaticPermalinkResolver(
        page_permalinks={
            "classfoo": "api/classes/foo",
            "foo_8h": "api/files/foo-h",
            "todo": "pages/todo",
        },
        anchor_owners={"foo_1intro": "classfoo"},
    )


@pytest.fixture
def options() -> RendererOptions:
    """Provide default renderer options."""
    return RendererOptions()


@pytest.fixture
def dispatcher(resolver: StaticPermalinkResolver, options: RendererOptions) -> RenderDispatcher:
    """Provide a dispatcher with every built-in renderer registered."""
    return create_dispatcher(resolver, options)


@pytest.fixture
def html_ctx() -> RenderContext:
    """Provide an HTML-mode render context."""
    return RenderContext(mode="html")
