# parsers/markdown_parser.py

import logging
from collections.abc import Iterable
from time import monotonic

from recipe_kit.observability import names
from recipe_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .headings import tokenize_heading
from .models import (
    MAIN_SECTION_LEVEL,
    SUBSECTION_LEVEL,
    ParsedDocument,
    Section,
    Subsection,
)

logger = logging.getLogger(__name__)


def build_document(lines: Iterable[str]) -> ParsedDocument:
    """Assemble `###` / `####` blocks into a two-level section tree.

    Single pass, no backtracking. Pending content lines are buffered and
    flushed into the most recent subsection when the next heading (or the
    end of input) arrives. Content that precedes the first `####` of a
    section that later gets subsections is dropped, not merged.
    """
    sections: list[Section] = []

    main_title: str | None = None
    subsections: list[Subsection] = []
    buffer: list[str] = []

    def flush_into_last_subsection() -> None:
        if buffer and subsections:
            last = subsections[-1]
            subsections[-1] = Subsection(title=last.title, content=list(buffer))

    def emit_main_section() -> None:
        if main_title is None:
            return
        sections.append(
            Section(
                title=main_title,
                content=[] if subsections else list(buffer),
                subsections=list(subsections),
            )
        )

    for line in lines:
        trimmed = line.strip()
        heading = tokenize_heading(trimmed)

        if heading is not None:
            if heading.level == MAIN_SECTION_LEVEL:
                flush_into_last_subsection()
                emit_main_section()
                main_title = heading.title
                subsections = []
                buffer = []
            elif heading.level == SUBSECTION_LEVEL:
                flush_into_last_subsection()
                subsections.append(Subsection(title=heading.title))
                buffer = []
            else:
                logger.debug(
                    "Ignoring level-%d heading: %s", heading.level, heading.title
                )
            continue

        if trimmed:
            buffer.append(trimmed)

    flush_into_last_subsection()
    emit_main_section()

    return ParsedDocument(sections=sections)


class MarkdownRecipeParser(DocumentParser):
    """
    Parser for the heading-structured text a recipe model emits.
    - `###` opens a main section, `####` a subsection
    - Empty lines are dropped
    - Other heading levels are tolerated and ignored
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, text: str) -> ParsedDocument:
        start = monotonic()
        document = build_document(text.splitlines())
        elapsed_ms = 1000 * (monotonic() - start)

        subsection_count = sum(len(s.subsections) for s in document.sections)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.PARSE_SECTIONS_TOTAL, len(document.sections)
        )
        self.metrics_hook.increment(names.PARSE_SUBSECTIONS_TOTAL, subsection_count)

        logger.debug(
            "Parsed %d sections (%d subsections): %s",
            len(document.sections),
            subsection_count,
            document.titles,
        )
        return document
