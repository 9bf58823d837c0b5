from .base import DocumentParser
from .headings import tokenize_heading
from .markdown_parser import MarkdownRecipeParser, build_document
from .models import Heading, ParsedDocument, Section, Subsection, normalize_title

__all__ = [
    "DocumentParser",
    "Heading",
    "MarkdownRecipeParser",
    "ParsedDocument",
    "Section",
    "Subsection",
    "build_document",
    "normalize_title",
    "tokenize_heading",
]
