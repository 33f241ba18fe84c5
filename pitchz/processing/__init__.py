from typing import TYPE_CHECKING, Protocol, TypeVar

# Necessary to avoid circular imports with ..models
if TYPE_CHECKING:
    from ..models import Deck

_T = TypeVar("_T", covariant=True)


class Processor(Protocol[_T]):
    def process(self, deck: "Deck") -> _T: ...
