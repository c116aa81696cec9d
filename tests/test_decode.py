# tests/test_decode.py
import pytest

from phrasefinder.corpus import Corpus
from phrasefinder.decode import decode_body, decode_lines, decode_response, parse_line, parse_term
from phrasefinder.encoding import IdLayout, pack_phrase_id
from phrasefinder.errors import DecodeError, InvalidArgumentError
from phrasefinder.phrase import Tag, Token
from phrasefinder.result import Status

ID_US = pack_phrase_id(Corpus.AMERICAN_ENGLISH.ordinal, 1234)


def _line(tokens, match=123, volumes=45, first=1800, last=2008, pid=ID_US, score="0.5"):
    return "\t".join([tokens, str(match), str(volumes), str(first), str(last), str(pid), str(score)])


def test_parses_synthetic_line():
    phrase = parse_line(_line("I_0 like_0 to_1"))
    assert phrase.tokens == (
        Token("I", Tag.GIVEN),
        Token("like", Tag.GIVEN),
        Token("to", Tag.INSERTED),
    )
    assert phrase.match_count == 123
    assert phrase.volume_count == 45
    assert phrase.first_year == 1800
    assert phrase.last_year == 2008
    assert phrase.id == ID_US
    assert phrase.score == 0.5
    assert phrase.corpus() is Corpus.AMERICAN_ENGLISH


@pytest.mark.parametrize("term,expected", [
    ("a_0", Token("a", Tag.GIVEN)),
    ("cat_2", Token("cat", Tag.ALTERNATIVE)),
    ("run+_3", Token("run+", Tag.COMPLETED)),
    ("snake_case_0", Token("snake_case", Tag.GIVEN)),
    ("x_1_1", Token("x_1", Tag.INSERTED)),
    ("__0", Token("_", Tag.GIVEN)),
    ("größer_1", Token("größer", Tag.INSERTED)),
])
def test_parse_term_splits_at_last_separator(term, expected):
    assert parse_term(term) == expected


def test_tag_digit_equal_to_tag_count_fails():
    with pytest.raises(InvalidArgumentError):
        parse_term("word_4")
    with pytest.raises(DecodeError):
        parse_line(_line("I_0 word_4"), line_no=3)


@pytest.mark.parametrize("term", ["_0", "a0", "a", "", "word-1", "word_x", "word_٣"])
def test_malformed_terms_fail(term):
    with pytest.raises(DecodeError):
        parse_term(term)


def test_double_space_yields_empty_term_and_fails():
    with pytest.raises(DecodeError):
        parse_line(_line("I_0  like_0"))


def test_fewer_than_seven_fields_fails():
    line = "I_0\t1\t2\t1900\t2000\t5"
    with pytest.raises(DecodeError) as ei:
        parse_line(line, line_no=2)
    assert ei.value.line_no == 2
    assert "line 2" in str(ei.value)


def test_extra_fields_are_ignored():
    phrase = parse_line(_line("a_0") + "\textra")
    assert str(phrase) == "a"


@pytest.mark.parametrize("field,line", [
    ("match_count", _line("a_0", match="12x")),
    ("match_count", _line("a_0", match="-1")),
    ("volume_count", _line("a_0", volumes="")),
    ("first_year", _line("a_0", first="18.5")),
    ("last_year", _line("a_0", last="1_000")),
    ("id", _line("a_0", pid="abc")),
    ("id", _line("a_0", pid=str(1 << 64))),
    ("score", _line("a_0", score="nan")),
    ("score", _line("a_0", score="inf")),
    ("score", _line("a_0", score="-0.1")),
    ("score", _line("a_0", score="")),
])
def test_malformed_numeric_field_names_field_and_line(field, line):
    with pytest.raises(DecodeError) as ei:
        parse_line(line, line_no=7)
    assert ei.value.field == field
    assert ei.value.line_no == 7
    assert field in str(ei.value)


def test_accepts_scientific_score_and_negative_years():
    phrase = parse_line(_line("a_0", first=-50, last=-10, score="1.5e-07"))
    assert phrase.score == pytest.approx(1.5e-07)
    assert (phrase.first_year, phrase.last_year) == (-50, -10)


def test_phrase_length_is_not_bounded():
    tokens = " ".join(f"w{i}_0" for i in range(7))
    assert len(parse_line(_line(tokens))) == 7


def test_decode_body_preserves_order_and_duplicates():
    body = "\n".join([
        _line("b_0", score="0.1"),
        _line("a_0", score="0.9"),
        _line("b_0", score="0.1"),
    ]) + "\n"
    phrases = decode_body(body.encode("utf-8"))
    assert [str(p) for p in phrases] == ["b", "a", "b"]
    assert [p.score for p in phrases] == [0.1, 0.9, 0.1]


def test_decode_body_empty():
    assert decode_body(b"") == []
    assert decode_body("") == []


def test_decode_body_without_trailing_newline_and_crlf():
    body = _line("a_0") + "\r\n" + _line("b_1")
    assert [str(p) for p in decode_body(body)] == ["a", "b"]


def test_decode_body_blank_interior_line_fails():
    body = _line("a_0") + "\n\n" + _line("b_0") + "\n"
    with pytest.raises(DecodeError) as ei:
        decode_body(body)
    assert ei.value.line_no == 2


def test_decode_body_invalid_utf8():
    with pytest.raises(DecodeError):
        decode_body(b"\xff\xfe_0\t1\t1\t1\t1\t1\t0.1\n")


def test_decode_body_unicode_tokens():
    body = _line("我_0 们_1").encode("utf-8")
    assert str(decode_body(body)[0]) == "我 们"


def test_decode_lines_reports_offending_line(caplog):
    with pytest.raises(DecodeError) as ei:
        decode_lines([_line("a_0"), _line("b_0"), "broken"])
    assert ei.value.line_no == 3
    assert "line 3" in caplog.text


def test_decode_response_ok():
    result = decode_response(200, (_line("a_0") + "\n").encode())
    assert result.status is Status.OK
    assert [str(p) for p in result.phrases] == ["a"]


def test_decode_response_ok_empty_body():
    result = decode_response(200, b"")
    assert result.status is Status.OK
    assert result.phrases == ()


def test_decode_response_non_ok_skips_body():
    result = decode_response(400, b"this is not tsv at all")
    assert result.status is Status.BAD_REQUEST
    assert result.phrases == ()


@pytest.mark.parametrize("code", [201, 204, 301, 404, 503])
def test_decode_response_unknown_status_raises(code):
    with pytest.raises(InvalidArgumentError):
        decode_response(code, b"")


def test_layout_is_recorded_on_decoded_phrases():
    legacy_id = pack_phrase_id(Corpus.FRENCH.ordinal, 5, IdLayout.CORPUS_BYTE_32)
    body = _line("bonjour_0", pid=legacy_id) + "\n"

    phrases = decode_body(body, layout=IdLayout.CORPUS_BYTE_32)
    assert phrases[0].id_layout is IdLayout.CORPUS_BYTE_32
    assert phrases[0].corpus() is Corpus.FRENCH

    result = decode_response(200, body, layout=IdLayout.CORPUS_BYTE_32)
    assert result.phrases[0].corpus() is Corpus.FRENCH


def test_parse_line_defaults_to_shift_40_layout():
    assert parse_line(_line("a_0")).id_layout is IdLayout.CORPUS_SHIFT_40
