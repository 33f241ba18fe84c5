from .code import CodeBlock, DeckStats
from .deck import Deck, Section, Slide, Transition
from .scalars import Language, SlideIndex, TitlePath

__all__ = [
    "CodeBlock",
    "Deck",
    "DeckStats",
    "Language",
    "Section",
    "Slide",
    "SlideIndex",
    "TitlePath",
    "Transition",
]
