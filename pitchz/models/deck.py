"""Model classes for parsed decks.

The main class is `Deck`. It's an ordered tuple of `Slide`s, each one remembering the \
raw directive and separator lines surrounding its body so that the source document \
can be rebuilt from the deck. `Section`s are derived from the slides' transitions.
"""

from dataclasses import dataclass, field
from enum import Enum

from .scalars import SlideIndex, TitlePath

__all__ = ["Deck", "Section", "Slide", "Transition"]


class Transition(Enum):
    """Kind of separator found between two slides."""

    VERTICAL = "+++"
    """The next slide is a sub-slide, in the same section."""

    HORIZONTAL = "---"
    """The next slide starts a new section."""


@dataclass(frozen=True)
class Slide:
    index: SlideIndex
    title_path: TitlePath
    body: str
    directive: str = ""
    """Raw directive line, line ending included. Empty if the slide has none."""

    transition: Transition | None = None
    """Separator following the slide. None for the last slide of the deck."""

    separator: str = ""
    """Raw separator line following the slide, line ending included."""

    @property
    def title(self) -> str | None:
        return self.title_path[-1] if self.title_path else None

    @property
    def source(self) -> str:
        return self.directive + self.body


@dataclass(frozen=True)
class Section:
    """Slides between two horizontal separators."""

    index: int
    slides: tuple[Slide, ...]

    @property
    def title_path(self) -> TitlePath:
        return self.slides[0].title_path


@dataclass(frozen=True)
class Deck:
    slides: tuple[Slide, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.slides)

    @property
    def sections(self) -> tuple[Section, ...]:
        sections = []
        current: list[Slide] = []
        for slide in self.slides:
            current.append(slide)
            if slide.transition is not Transition.VERTICAL:
                sections.append(Section(len(sections), tuple(current)))
                current = []
        if current:
            sections.append(Section(len(sections), tuple(current)))
        return tuple(sections)

    def titled(self) -> tuple[Slide, ...]:
        return tuple(slide for slide in self.slides if slide.title_path)

    def to_text(self) -> str:
        """Rebuild the document the deck was parsed from, byte for byte."""
        return "".join(slide.source + slide.separator for slide in self.slides)
