"""Model classes for values derived from a deck by the processors."""

from dataclasses import dataclass, field

from .scalars import Language, SlideIndex


@dataclass(frozen=True)
class CodeBlock:
    """Fenced code block found in a slide body. The code is never interpreted."""

    slide_index: SlideIndex
    language: Language | None
    """Info string of the opening fence, None if the fence has none."""

    code: str
    """Lines between the fences, verbatim."""

    terminated: bool = True
    """False if the body ended before the closing fence."""


@dataclass(frozen=True)
class DeckStats:
    sections: int
    slides: int
    titled_slides: int
    untitled_slides: int
    code_blocks: dict[str, int] = field(default_factory=dict)
    """Number of fenced code blocks per language, "" for untagged blocks."""
