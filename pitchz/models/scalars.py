from typing import NewType

SlideIndex = NewType("SlideIndex", int)
Language = NewType("Language", str)
TitlePath = tuple[str, ...]
