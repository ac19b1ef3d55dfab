"""Command tree abstraction consumed by the ReST renderer.

The renderer never builds commands itself. It reads any object that
satisfies ``CommandNode``; ``clirest.click_nodes`` provides the click
implementation.

Example:
    >>> reference_slug("app sub cmd")
    'app_sub_cmd'
"""

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

# (display name, reference slug) -> hyperlink markup
LinkHandler = Callable[[str, str], str]

# output file path -> text written before the page body
FilePrepender = Callable[[str], str]


@runtime_checkable
class FlagSet(Protocol):
    """Protocol for a collection of command-line flags.

    The renderer only asks whether there is anything to show and for the
    framework's own default rendering.
    """

    def has_available_flags(self) -> bool:
        """Return True if at least one flag is displayable."""
        ...

    def format_defaults(self) -> str:
        """Return the default-formatted flag listing, one flag per line."""
        ...


@runtime_checkable
class CommandNode(Protocol):
    """Protocol for one command in a CLI hierarchy.

    ``parent`` is a lookup back-reference only. Children are owned by
    whoever built the tree.
    """

    @property
    def name(self) -> str: ...

    @property
    def path(self) -> str:
        """Full space-separated invocation chain, e.g. ``app sub cmd``."""
        ...

    @property
    def short(self) -> str: ...

    @property
    def long(self) -> str: ...

    @property
    def usage(self) -> str: ...

    @property
    def example(self) -> str: ...

    @property
    def runnable(self) -> bool:
        """True if the command can be executed directly."""
        ...

    @property
    def available(self) -> bool:
        """True if the command is shown to users (not hidden or deprecated)."""
        ...

    @property
    def help_topic(self) -> bool:
        """True for placeholder commands that only carry help text."""
        ...

    @property
    def own_flags(self) -> FlagSet: ...

    @property
    def inherited_flags(self) -> FlagSet: ...

    @property
    def parent(self) -> "CommandNode | None": ...

    @property
    def children(self) -> Sequence["CommandNode"]: ...


def reference_slug(path: str) -> str:
    """Derive the anchor and file stem for a command path.

    Distinct paths can collide, e.g. ``app sub_cmd`` and ``app sub cmd``.
    """
    return path.replace(" ", "_")
