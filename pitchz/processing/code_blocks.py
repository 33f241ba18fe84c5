from ..models import CodeBlock, Deck, Language, Slide
from . import Processor

_FENCE_CHARS = "`~"


class CodeBlocksProcessor(Processor[list[CodeBlock]]):
    """Extract the fenced code blocks of every slide, in presentation order."""

    def __init__(self, language: str | None = None) -> None:
        self._language = language

    def process(self, deck: Deck) -> list[CodeBlock]:
        blocks = [block for slide in deck.slides for block in self._blocks(slide)]
        if self._language is None:
            return blocks
        return [block for block in blocks if block.language == self._language]

    def _blocks(self, slide: Slide) -> list[CodeBlock]:
        blocks = []
        fence: str | None = None
        language: str | None = None
        code: list[str] = []
        for line in slide.body.splitlines(keepends=True):
            stripped = line.strip()
            if fence is None:
                opening = _opening_fence(stripped)
                if opening is not None:
                    fence, language = opening
                    code = []
            elif _closes(stripped, fence):
                blocks.append(
                    CodeBlock(
                        slide.index,
                        Language(language) if language else None,
                        "".join(code),
                    )
                )
                fence = None
            else:
                code.append(line)
        if fence is not None:
            blocks.append(
                CodeBlock(
                    slide.index,
                    Language(language) if language else None,
                    "".join(code),
                    terminated=False,
                )
            )
        return blocks


def _opening_fence(stripped: str) -> tuple[str, str] | None:
    if not stripped or stripped[0] not in _FENCE_CHARS:
        return None
    char = stripped[0]
    fence = stripped[: len(stripped) - len(stripped.lstrip(char))]
    if len(fence) < 3:
        return None
    info = stripped[len(fence) :].strip()
    # backtick fences cannot carry backticks in their info string
    if char == "`" and "`" in info:
        return None
    return fence, info.split()[0] if info else ""


def _closes(stripped: str, fence: str) -> bool:
    return len(stripped) >= len(fence) and stripped == fence[0] * len(stripped)
