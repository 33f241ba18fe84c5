from collections import Counter

from ..models import Deck, DeckStats
from . import Processor
from .code_blocks import CodeBlocksProcessor


class StatsProcessor(Processor[DeckStats]):
    def process(self, deck: Deck) -> DeckStats:
        titled = len(deck.titled())
        languages = Counter(
            block.language or "" for block in CodeBlocksProcessor().process(deck)
        )
        return DeckStats(
            sections=len(deck.sections),
            slides=len(deck.slides),
            titled_slides=titled,
            untitled_slides=len(deck.slides) - titled,
            code_blocks=dict(sorted(languages.items())),
        )
