"""
Shared test fixtures for clirest tests.

This module provides common fixtures used across all test types:
- A small click application with nested, hidden and help-topic commands
- The same application wrapped as a command tree
- A framework-free mock tree
- An output directory for generated pages
"""

import click
import pytest

from clirest.click_nodes import ClickCommandNode
from tests.mocks.command_tree import MockCommand

# ============================================================================
# CLICK FIXTURES
# ============================================================================


@pytest.fixture
def click_app():
    """Click application covering every kind of command the renderer sees.

    Layout:
        app            group, not runnable on its own, --verbose option
        app bye        plain command
        app config     group
        app config show
        app hello      command with --name option and examples
        app secret     hidden
        app topics     help topic (no callback, no children)
    """

    @click.group(help="Manage widgets.\n\nThe app command groups every widget operation.")
    @click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
    def app(verbose):
        pass

    @app.command(epilog="app hello --name Ada\n\napp hello")
    @click.option("--name", default="world", show_default=True, help="Who to greet.")
    def hello(name):
        """Say hello."""

    @app.command()
    def bye():
        """Say goodbye."""

    @app.command(hidden=True)
    def secret():
        """Do hidden things."""

    @app.group()
    def config():
        """Manage configuration."""

    @config.command("show")
    def config_show():
        """Show configuration."""

    app.add_command(click.Command("topics", help="Read about widget concepts."))
    return app


@pytest.fixture
def click_tree(click_app):
    """Root node of ``click_app``."""
    return ClickCommandNode(click_app, info_name="app")


# ============================================================================
# MOCK TREE FIXTURES
# ============================================================================


@pytest.fixture
def mock_tree():
    """Root ``app`` with children ``b``, ``a`` and an unavailable ``c``."""
    root = MockCommand(name="app", short="The app", usage="app [flags]")
    root.add(MockCommand(name="b", short="B things", usage="app b"))
    root.add(MockCommand(name="a", short="A things", usage="app a"))
    root.add(MockCommand(name="c", short="C things", available=False))
    return root


# ============================================================================
# OUTPUT FIXTURES
# ============================================================================


@pytest.fixture
def docs_dir(tmp_path):
    """Empty output directory for generated pages."""
    out = tmp_path / "docs"
    out.mkdir()
    return out
