"""clirest - reStructuredText reference pages for CLI command trees

Philosophy:
- One page per command, nothing else
- The command framework formats its own flags
- Fail fast on I/O errors, never clean up behind the caller

Walk a command tree and write one ``.rst`` page per command, with usage,
examples, options and SEE ALSO cross-links between parents and children.
"""

from clirest.click_nodes import ClickCommandNode, ClickFlagSet
from clirest.config import ConfigManager, DocsConfig, generate_docs
from clirest.exceptions import ClirestError, ConfigError, DocWriteError
from clirest.rest_docs import (
    default_link_handler,
    empty_prepender,
    gen_rest,
    gen_rest_custom,
    gen_rest_tree,
    gen_rest_tree_custom,
    render_rest,
)

__version__ = "0.1.0"
__all__ = [
    "ClickCommandNode",
    "ClickFlagSet",
    "ClirestError",
    "ConfigError",
    "ConfigManager",
    "DocsConfig",
    "DocWriteError",
    "__version__",
    "default_link_handler",
    "empty_prepender",
    "gen_rest",
    "gen_rest_custom",
    "gen_rest_tree",
    "gen_rest_tree_custom",
    "generate_docs",
    "render_rest",
]
