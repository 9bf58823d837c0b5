# parsers/headings.py

import re

from .models import Heading

# Three or more hashes, whitespace, then a title. Deeper levels are still
# tokenized; the tree builder only acts on levels 3 and 4.
_HEADING_RE = re.compile(r"^(#{3,})\s+(.+)$")


def tokenize_heading(line: str) -> Heading | None:
    """Classify one trimmed line as a heading or plain content.

    A trailing clause after the first colon is folded into the title, so
    `#### For the Sauce: reduce until thick` keeps both parts:

        >>> tokenize_heading("#### For the Sauce: reduce until thick")
        Heading(level=4, title='For the Sauce: reduce until thick')
        >>> tokenize_heading("- 1 cup flour") is None
        True
    """
    match = _HEADING_RE.match(line)
    if match is None:
        return None

    level = len(match.group(1))
    head, colon, tail = match.group(2).partition(":")
    title = head.strip()
    tail = tail.strip()
    if colon and tail:
        title = f"{title}: {tail}"

    if not title:
        return None

    return Heading(level=level, title=title)
