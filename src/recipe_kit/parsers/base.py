# parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedDocument


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> ParsedDocument:
        """
        Parse generated recipe text into a section tree.

        Requirements:
        - Deterministic output for same input
        - Never raises on grammar deviations
        - No I/O
        """
        raise NotImplementedError
