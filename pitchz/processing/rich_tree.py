from rich.markup import escape
from rich.tree import Tree

from ..models import Deck, Section, Slide
from . import Processor
from .code_blocks import CodeBlocksProcessor


class RichTreeProcessor(Processor[Tree]):
    """Outline a deck: one branch per section, sub-slides as leaves."""

    def __init__(self, name: str = "deck", with_code: bool = False) -> None:
        self._name = name
        self._with_code = with_code

    def process(self, deck: Deck) -> Tree:
        languages: dict[int, list[str]] = {}
        if self._with_code:
            for block in CodeBlocksProcessor().process(deck):
                languages.setdefault(block.slide_index, []).append(
                    block.language or "text"
                )
        tree = Tree(escape(self._name))
        for section in deck.sections:
            tree.children.append(self._process_section(section, languages))
        return tree

    def _process_section(
        self, section: Section, languages: dict[int, list[str]]
    ) -> Tree:
        first, *others = section.slides
        tree = Tree(f"[bold]{section.index + 1}.[/] {_label(first, languages)}")
        for slide in others:
            tree.children.append(Tree(_label(slide, languages)))
        return tree


def _label(slide: Slide, languages: dict[int, list[str]]) -> str:
    if slide.title_path:
        label = escape(" > ".join(slide.title_path))
    else:
        label = "[dim](untitled)[/]"
    if slide.index in languages:
        label = f"{label} [cyan]({escape(', '.join(languages[slide.index]))})[/]"
    return label
