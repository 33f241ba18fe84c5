class PitchzError(Exception):
    pass


class ParseError(PitchzError):
    def __init__(self, slide_index: int, directive: str, reason: str) -> None:
        self.slide_index = slide_index
        self.directive = directive
        self.reason = reason
        super().__init__(
            f"slide {slide_index}: {reason} in directive {directive.strip()!r}"
        )


class DeckNotFoundError(PitchzError):
    pass


class DeckDecodeError(PitchzError):
    pass
