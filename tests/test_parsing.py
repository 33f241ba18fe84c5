from pathlib import Path

from pytest import fixture, mark, raises

from pitchz import load_deck, parse_deck
from pitchz.exceptions import DeckDecodeError, DeckNotFoundError, ParseError
from pitchz.models import Transition
from pitchz.parsing import Parser

data_dir = Path(__file__).parent / "data"


@fixture
def pitchme() -> str:
    return (data_dir / "PITCHME.md").read_text(encoding="utf8")


def test_single_title() -> None:
    deck = parse_deck("@title[Iterables]\nSome prose.\n")

    assert len(deck.slides) == 1
    assert deck.slides[0].title_path == ("Iterables",)
    assert deck.slides[0].body == "Some prose.\n"
    assert deck.slides[0].transition is None


def test_nested_titles() -> None:
    deck = parse_deck("@title[Sequence:Game]\n+++\n@title[Sequence:Game:Answer]\n")

    assert deck.slides[0].title_path == ("Sequence", "Game")
    assert deck.slides[1].title_path == ("Sequence", "Game", "Answer")
    assert deck.slides[1].title == "Answer"


def test_title_components_are_stripped() -> None:
    deck = parse_deck("  @title[ Sequence : Game ]  \nbody\n")

    assert deck.slides[0].title_path == ("Sequence", "Game")


def test_brackets_inside_title() -> None:
    deck = parse_deck("@title[Indexing:obj[0]]\n")

    assert deck.slides[0].title_path == ("Indexing", "obj[0]")


def test_slide_count(pitchme: str) -> None:
    vertical = pitchme.count("\n+++\n")
    horizontal = pitchme.count("\n---\n")

    deck = parse_deck(pitchme)

    assert len(deck.slides) == vertical + horizontal + 1
    assert [slide.index for slide in deck.slides] == list(range(len(deck.slides)))


def test_transitions(pitchme: str) -> None:
    deck = parse_deck(pitchme)

    assert [slide.transition for slide in deck.slides] == [
        Transition.HORIZONTAL,
        Transition.VERTICAL,
        Transition.VERTICAL,
        Transition.HORIZONTAL,
        Transition.VERTICAL,
        None,
    ]


def test_untitled_segment_is_its_own_slide(pitchme: str) -> None:
    deck = parse_deck(pitchme)

    untitled = deck.slides[3]
    assert untitled.title_path == ()
    assert untitled.title is None
    assert untitled.directive == ""
    assert untitled.body == "Is `Squares()` an `Iterable` then?\n\n"


def test_consecutive_untitled_segments() -> None:
    deck = parse_deck("first\n+++\nsecond\n")

    assert [slide.title_path for slide in deck.slides] == [(), ()]
    assert [slide.body for slide in deck.slides] == ["first\n", "second\n"]


def test_code_blocks_are_kept_verbatim(pitchme: str) -> None:
    deck = parse_deck(pitchme)

    assert "```python\nclass Squares:\n" in deck.slides[2].body
    assert "~~~\n>>> next(range(3))\n" in deck.slides[5].body


def test_directive_must_be_first_line() -> None:
    deck = parse_deck("intro\n@title[Late]\n")

    assert deck.slides[0].title_path == ()
    assert deck.slides[0].body == "intro\n@title[Late]\n"


def test_separator_with_trailing_whitespace() -> None:
    deck = parse_deck("a\n---  \nb\n")

    assert len(deck.slides) == 2
    assert deck.slides[0].separator == "---  \n"
    assert deck.slides[0].transition is Transition.HORIZONTAL


def test_indented_separator_is_content() -> None:
    deck = parse_deck("a\n  ---\nb\n")

    assert len(deck.slides) == 1


def test_empty_document() -> None:
    deck = parse_deck("")

    assert len(deck.slides) == 1
    assert deck.slides[0].body == ""


def test_trailing_separator_yields_empty_slide() -> None:
    deck = parse_deck("@title[A]\n---\n")

    assert len(deck.slides) == 2
    assert deck.slides[1].body == ""
    assert deck.slides[1].title_path == ()


def test_determinism(pitchme: str) -> None:
    assert parse_deck(pitchme) == parse_deck(pitchme)


@mark.parametrize(
    "text",
    [
        "intro\n",
        "@title[A]\nbody\n---\n@title[B:C]\nbody\n+++\nno title\n",
        "a\r\n+++\r\n@title[B]\r\nb\r\n",
        "no trailing newline\n---\n@title[X]",
        "\n---\n---\n+++\n",
    ],
)
def test_round_trip(text: str) -> None:
    assert parse_deck(text).to_text() == text


def test_round_trip_file(pitchme: str) -> None:
    assert load_deck(data_dir / "PITCHME.md").to_text() == pitchme


@mark.parametrize(
    "directive, reason",
    [
        ("@title[Sequence", "missing closing bracket"),
        ("@title[Sequence[0", "unbalanced brackets"),
        ("@title[]", "empty title component"),
        ("@title[A::B]", "empty title component"),
        ("@title[A: ]", "empty title component"),
        ("@title[A]]", "unexpected text after closing bracket"),
        ("@title[A] trailing", "unexpected text after closing bracket"),
    ],
)
def test_malformed_directive(directive: str, reason: str) -> None:
    with raises(ParseError) as error_info:
        parse_deck(f"@title[Fine]\n---\n{directive}\nbody\n")

    assert error_info.value.slide_index == 1
    assert error_info.value.directive == f"{directive}\n"
    assert error_info.value.reason == reason
    assert directive in str(error_info.value)


def test_load_missing_deck(tmp_path: Path) -> None:
    with raises(DeckNotFoundError):
        load_deck(tmp_path / "PITCHME.md")


def test_load_with_encoding(tmp_path: Path) -> None:
    path = tmp_path / "PITCHME.md"
    path.write_text("@title[Itérables]\n", encoding="latin-1")

    deck = Parser("latin-1").from_file(path)

    assert deck.slides[0].title_path == ("Itérables",)


@mark.parametrize(
    "text",
    ["a\x0c---\nb\n", "intro\u2028+++\u2028more\n", "x\x0b---\x85+++\u2029\n"],
)
def test_only_newlines_end_lines(text: str) -> None:
    deck = parse_deck(text)

    assert len(deck.slides) == 1
    assert deck.slides[0].body == text


def test_carriage_return_ends_lines() -> None:
    deck = parse_deck("a\r+++\rb\r")

    assert [slide.body for slide in deck.slides] == ["a\r", "b\r"]
    assert deck.slides[0].separator == "+++\r"


def test_load_undecodable_deck(tmp_path: Path) -> None:
    path = tmp_path / "PITCHME.md"
    path.write_bytes(b"@title[A]\n\xff\xfe body\n")

    with raises(DeckDecodeError) as error_info:
        load_deck(path)

    assert "position 10" in str(error_info.value)
    assert str(path) in str(error_info.value)
    assert isinstance(error_info.value.__cause__, UnicodeDecodeError)
