# parsers/models.py

from dataclasses import dataclass, field

MAIN_SECTION_LEVEL = 3
SUBSECTION_LEVEL = 4


def normalize_title(title: str) -> str:
    """Lower-case a section title and drop its colons, for lookups."""
    return title.replace(":", "").lower()


@dataclass(frozen=True)
class Heading:
    level: int
    title: str


@dataclass(frozen=True)
class Subsection:
    title: str
    content: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Section:
    """A `###` block.

    `content` is only populated when the section has no subsections;
    otherwise every content line belongs to one of the subsections.
    """

    title: str
    content: list[str] = field(default_factory=list)
    subsections: list[Subsection] = field(default_factory=list)

    @property
    def first_line(self) -> str | None:
        return self.content[0] if self.content else None


@dataclass(frozen=True)
class ParsedDocument:
    sections: list[Section]

    def find_section(self, name: str) -> Section | None:
        """First section whose normalized title contains `name` (normalized)."""
        target = normalize_title(name)
        for section in self.sections:
            if target in normalize_title(section.title):
                return section
        return None

    def section_titled(self, name: str) -> Section | None:
        """First section whose title equals `name`, ignoring case."""
        target = name.lower()
        for section in self.sections:
            if section.title.lower() == target:
                return section
        return None

    @property
    def titles(self) -> list[str]:
        return [section.title for section in self.sections]
