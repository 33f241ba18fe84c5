from pitchz import parse_deck
from pitchz.models import Deck, Slide, SlideIndex, Transition


def test_sections_follow_horizontal_transitions() -> None:
    deck = parse_deck("@title[A]\n---\n@title[B]\n+++\n@title[B:C]\n---\n@title[D]\n")

    sections = deck.sections

    assert [section.index for section in sections] == [0, 1, 2]
    assert [[s.title for s in section.slides] for section in sections] == [
        ["A"],
        ["B", "C"],
        ["D"],
    ]
    assert sections[1].title_path == ("B",)


def test_sections_of_a_deck_without_separators() -> None:
    deck = parse_deck("just one slide\n")

    assert len(deck.sections) == 1
    assert deck.sections[0].slides == deck.slides


def test_titled() -> None:
    deck = parse_deck("@title[A]\n+++\nuntitled\n+++\n@title[B]\n")

    assert [slide.index for slide in deck.titled()] == [0, 2]
    assert len(deck) == 3


def test_source_includes_directive() -> None:
    slide = Slide(
        index=SlideIndex(0),
        title_path=("A",),
        body="body\n",
        directive="@title[A]\n",
        transition=Transition.VERTICAL,
        separator="+++\n",
    )

    assert slide.source == "@title[A]\nbody\n"
    assert Deck((slide,)).to_text() == "@title[A]\nbody\n+++\n"


def test_empty_deck() -> None:
    deck = Deck()

    assert deck.sections == ()
    assert deck.to_text() == ""


def test_sections_keep_trailing_vertical_slides() -> None:
    slides = tuple(
        Slide(
            index=SlideIndex(index),
            title_path=(str(index),),
            body="",
            transition=Transition.VERTICAL,
            separator="+++\n",
        )
        for index in range(2)
    )

    sections = Deck(slides).sections

    assert len(sections) == 1
    assert sections[0].slides == slides
