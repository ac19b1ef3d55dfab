"""reStructuredText page generation for command trees.

This module renders one ReST page per command and writes a whole
command tree into a directory, one flat file per command.

Page layout:
    .. _<slug>:          anchor used by cross-references
    <path> / -----       title
    Synopsis             long description, usage block
    Examples             literal block, when the command has examples
    Options              own flags, when any are displayable
    Options inherited... ancestor flags, when any are displayable
    SEE ALSO             parent and visible children

Links between pages go through a link handler so callers can target
Sphinx ``:ref:`` roles, plain files, or anything else.
"""

import logging
from pathlib import Path
from typing import TextIO

from clirest.exceptions import DocWriteError
from clirest.models import CommandNode, FilePrepender, FlagSet, LinkHandler, reference_slug
from clirest.text import indent_string

logger = logging.getLogger(__name__)

TITLE_UNDERLINE = "-"
SECTION_UNDERLINE = "~"
LITERAL_INDENT = "  "
DEFAULT_EXTENSION = "rst"


def default_link_handler(name: str, ref: str) -> str:
    """Link to the sibling ``.rst`` file of a command."""
    return f"`{name} <{ref}.rst>`_"


def empty_prepender(filename: str) -> str:
    return ""


def _section_header(title: str) -> str:
    return f"{title}\n{SECTION_UNDERLINE * len(title)}\n\n"


def _generate_flags(title: str, flags: FlagSet) -> str:
    if not flags.has_available_flags():
        return ""
    return f"{_section_header(title)}::\n\n{flags.format_defaults()}\n"


def _generate_options(cmd: CommandNode) -> str:
    own = _generate_flags("Options", cmd.own_flags)
    inherited = _generate_flags("Options inherited from parent commands", cmd.inherited_flags)
    return own + inherited


def _see_also_children(cmd: CommandNode) -> list[CommandNode]:
    """Visible children sorted by name, without touching the caller's order."""
    children = [child for child in cmd.children if child.available and not child.help_topic]
    return sorted(children, key=lambda child: child.name)


def _see_also_line(path: str, short: str, link_handler: LinkHandler) -> str:
    return f"* {link_handler(path, reference_slug(path))} \t - {short}\n"


def render_rest(cmd: CommandNode, link_handler: LinkHandler = default_link_handler) -> str:
    """Render the ReST page for a single command.

    Args:
        cmd: Command to document
        link_handler: Formats a (display name, reference slug) pair as a link

    Returns:
        Complete page text
    """
    name = cmd.path
    short = cmd.short
    long = cmd.long or short
    ref = reference_slug(name)

    sections = [
        f".. _{ref}:\n\n",
        f"{name}\n{TITLE_UNDERLINE * len(name)}\n\n",
        f"{short}\n\n",
        _section_header("Synopsis"),
        f"\n{long}\n\n",
    ]

    if cmd.runnable:
        sections.append(f"::\n\n{LITERAL_INDENT}{cmd.usage}\n\n")

    if cmd.example:
        sections.append(_section_header("Examples"))
        sections.append(f"::\n\n{indent_string(cmd.example, LITERAL_INDENT)}\n\n")

    sections.append(_generate_options(cmd))

    parent = cmd.parent
    children = _see_also_children(cmd)
    if parent is not None or children:
        sections.append(_section_header("SEE ALSO"))
        if parent is not None:
            sections.append(_see_also_line(parent.path, parent.short, link_handler))
        for child in children:
            sections.append(_see_also_line(f"{name} {child.name}", child.short, link_handler))
        sections.append("\n")

    return "".join(sections)


def gen_rest_custom(cmd: CommandNode, out: TextIO | None, link_handler: LinkHandler) -> str:
    """Render a command page with a custom link handler.

    Args:
        cmd: Command to document
        out: Writable text stream, or None to only return the page
        link_handler: Formats a (display name, reference slug) pair as a link

    Returns:
        The rendered page

    Raises:
        OSError: If writing to ``out`` fails
    """
    page = render_rest(cmd, link_handler)
    if out is not None:
        out.write(page)
    return page


def gen_rest(cmd: CommandNode, out: TextIO | None = None) -> str:
    """Render a command page using ``default_link_handler``."""
    return gen_rest_custom(cmd, out, default_link_handler)


def _gen_tree(
    cmd: CommandNode,
    directory: Path,
    file_prepender: FilePrepender,
    link_handler: LinkHandler,
    extension: str,
    written: list[Path],
) -> None:
    for child in cmd.children:
        if not child.available or child.help_topic:
            continue
        _gen_tree(child, directory, file_prepender, link_handler, extension, written)

    filename = directory / f"{reference_slug(cmd.path)}.{extension}"
    try:
        with open(filename, "w", encoding="utf-8") as f:
            f.write(file_prepender(str(filename)))
            gen_rest_custom(cmd, f, link_handler)
    except OSError as e:
        raise DocWriteError(f"Failed to write {filename}: {e}", filename) from e

    logger.debug(f"Wrote {filename}")
    written.append(filename)


def gen_rest_tree_custom(
    cmd: CommandNode,
    directory: str | Path,
    file_prepender: FilePrepender,
    link_handler: LinkHandler,
    extension: str = DEFAULT_EXTENSION,
) -> list[Path]:
    """Write a ReST page for a command and all of its visible descendants.

    Children are written before their parent. Hidden, deprecated and
    help-topic commands are skipped along with their subtrees. Files land
    flat in ``directory`` as ``<path with underscores>.<extension>``.

    Command names containing underscores can map two commands onto the
    same file (``app sub_cmd`` and ``app sub cmd``); the last one written
    wins.

    Args:
        cmd: Root of the subtree to document
        directory: Existing output directory
        file_prepender: Returns text written at the top of each file
        link_handler: Formats a (display name, reference slug) pair as a link
        extension: File extension without the dot

    Returns:
        Written file paths, in write order

    Raises:
        DocWriteError: If a file cannot be created or written. Pages already
            written are left in place.
    """
    written: list[Path] = []
    _gen_tree(cmd, Path(directory), file_prepender, link_handler, extension, written)
    logger.info(f"Generated {len(written)} ReST pages for '{cmd.path}' in {directory}")
    return written


def gen_rest_tree(cmd: CommandNode, directory: str | Path) -> list[Path]:
    """Write the tree with no file header and ``default_link_handler``."""
    return gen_rest_tree_custom(cmd, directory, empty_prepender, default_link_handler)
