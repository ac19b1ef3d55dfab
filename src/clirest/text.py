"""Text helpers for literal blocks."""


def indent_string(text: str, prefix: str) -> str:
    """Insert prefix at the start of every non-empty line.

    A line that is only a newline is left untouched, so blank lines inside
    a literal block stay blank. A missing trailing newline is preserved.

    Args:
        text: Text to indent
        prefix: String inserted before each non-empty line

    Returns:
        Indented text
    """
    return "\n".join(prefix + line if line else line for line in text.split("\n"))
