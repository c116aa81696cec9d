# tests/test_display.py
from phrasefinder.display import format_banner, format_phrase, format_result
from phrasefinder.phrase import Phrase, Tag, Token
from phrasefinder.result import SearchResult, Status

PHRASE = Phrase(
    tokens=(Token("I", Tag.GIVEN), Token("like", Tag.GIVEN), Token("tea", Tag.INSERTED)),
    match_count=1234,
    volume_count=56,
    first_year=1801,
    last_year=2008,
    score=0.5,
    id=9,
)


def test_format_phrase_plain():
    assert format_phrase(PHRASE) == "0.500000 I like tea"


def test_format_phrase_with_tags():
    assert format_phrase(PHRASE, show_tags=True) == "0.500000 I_0 like_0 tea_1"


def test_format_result_details():
    out = format_result(SearchResult(Status.OK, [PHRASE, PHRASE]), details=True)
    lines = out.splitlines()
    assert len(lines) == 2
    assert "matches=1,234" in lines[0]
    assert "years=1801-2008" in lines[0]


def test_format_result_empty():
    assert format_result(SearchResult(Status.OK)) == ""


def test_format_banner():
    assert format_banner("Results", width=5, style="-") == "Results\n-----"
