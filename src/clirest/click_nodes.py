"""Click implementation of the command tree protocols.

Wraps a ``click.Command`` (usually the application's root group) so the
ReST renderer can walk it. Each node owns a ``click.Context`` chained to
its parent's context, which is what click itself uses to build command
paths and usage lines.

Example:
    >>> root = ClickCommandNode(cli, info_name="app")
    >>> [child.path for child in root.children]
    ['app connect', 'app list']
"""

import inspect
from functools import cached_property

import click

from clirest.models import CommandNode

# Max length of a short description derived from the docstring
SHORT_HELP_LIMIT = 150

# Wrap width for option help, independent of the terminal
HELP_WIDTH = 80


def _clean_help(text: str | None) -> str:
    """Strip click help markup (``\\b`` paragraphs, ``\\f`` truncation)."""
    if not text:
        return ""
    text = inspect.cleandoc(text).split("\f", 1)[0]
    return "\n".join(line for line in text.splitlines() if line.strip() != "\b").strip()


class ClickFlagSet:
    """Options of one or more click contexts, formatted the way click does."""

    def __init__(self, options: list[tuple[click.Option, click.Context]] | None = None):
        self._options = list(options or [])

    @property
    def options(self) -> list[click.Option]:
        return [option for option, _ in self._options]

    def _help_records(self) -> list[tuple[str, str]]:
        records = []
        for option, ctx in self._options:
            record = option.get_help_record(ctx)
            if record is not None:
                records.append(record)
        return records

    def has_available_flags(self) -> bool:
        """Return True if any option has a help record (hidden ones do not)."""
        return bool(self._help_records())

    def format_defaults(self) -> str:
        """Render options as an indented definition list.

        Returns:
            Formatted text ending in a newline, or an empty string
        """
        records = self._help_records()
        if not records:
            return ""

        formatter = click.HelpFormatter(width=HELP_WIDTH)
        with formatter.indentation():
            formatter.write_dl(records)
        return formatter.getvalue()


class ClickCommandNode:
    """One click command exposed as a ``CommandNode``."""

    def __init__(
        self,
        command: click.Command,
        info_name: str | None = None,
        parent: "ClickCommandNode | None" = None,
    ):
        self.command = command
        self._parent = parent
        self.context = click.Context(
            command,
            info_name=info_name or command.name,
            parent=parent.context if parent is not None else None,
        )

    @property
    def name(self) -> str:
        return self.context.info_name or ""

    @property
    def path(self) -> str:
        """Names of the context chain only; ancestor arguments are left out."""
        names = []
        ctx: click.Context | None = self.context
        while ctx is not None:
            names.append(ctx.info_name or "")
            ctx = ctx.parent
        return " ".join(reversed(names))

    @property
    def short(self) -> str:
        return self.command.get_short_help_str(limit=SHORT_HELP_LIMIT)

    @property
    def long(self) -> str:
        return _clean_help(self.command.help)

    @property
    def usage(self) -> str:
        pieces = self.command.collect_usage_pieces(self.context)
        return " ".join([self.context.command_path, *pieces])

    @property
    def example(self) -> str:
        return _clean_help(self.command.epilog)

    @property
    def runnable(self) -> bool:
        # A group only runs on its own when asked to
        if isinstance(self.command, click.Group):
            return bool(self.command.invoke_without_command)
        return self.command.callback is not None

    @property
    def available(self) -> bool:
        if self.command.hidden or self.command.deprecated:
            return False
        return self.runnable or any(child.available for child in self.children)

    @property
    def help_topic(self) -> bool:
        if self.runnable or self.command.hidden or self.command.deprecated:
            return False
        return all(child.help_topic for child in self.children)

    @property
    def own_flags(self) -> ClickFlagSet:
        params = self.command.get_params(self.context)
        return ClickFlagSet([(p, self.context) for p in params if isinstance(p, click.Option)])

    @property
    def inherited_flags(self) -> ClickFlagSet:
        """Options of every ancestor, nearest first, without their help options.

        An ancestor option is skipped when the command itself or a nearer
        ancestor already declares one of its names.
        """
        seen: set[str] = set()
        for param in self.command.get_params(self.context):
            if isinstance(param, click.Option):
                seen.update(param.opts)

        options = []
        node = self._parent
        while node is not None:
            ctx = node.context
            help_names = set(ctx.help_option_names)
            for param in node.command.get_params(ctx):
                if not isinstance(param, click.Option) or help_names.intersection(param.opts):
                    continue
                if seen.intersection(param.opts):
                    continue
                seen.update(param.opts)
                options.append((param, ctx))
            node = node._parent
        return ClickFlagSet(options)

    @property
    def parent(self) -> CommandNode | None:
        return self._parent

    @cached_property
    def children(self) -> list["ClickCommandNode"]:
        if not isinstance(self.command, click.Group):
            return []

        nodes = []
        for name in self.command.list_commands(self.context):
            sub = self.command.get_command(self.context, name)
            if sub is None:
                continue
            nodes.append(ClickCommandNode(sub, info_name=name, parent=self))
        return nodes

    def __repr__(self) -> str:
        return f"ClickCommandNode({self.path!r})"
