# tests/test_cli.py
import logging

import pytest

import phrasefinder.cli as cli
from phrasefinder.corpus import Corpus
from phrasefinder.errors import TransportError
from phrasefinder.phrase import Phrase, Tag, Token
from phrasefinder.result import SearchResult, Status


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    prev = list(root.handlers)
    prev_level = root.level
    yield
    for h in list(root.handlers):
        if h not in prev:
            root.removeHandler(h)
            h.close()
    root.setLevel(prev_level)


@pytest.fixture()
def calls(monkeypatch):
    recorded = []

    def fake_search(query, options=None, **kwargs):
        recorded.append((query, options, kwargs))
        phrase = Phrase(
            tokens=(Token("I", Tag.GIVEN), Token("like", Tag.GIVEN), Token("tea", Tag.INSERTED)),
            match_count=10, volume_count=2, first_year=1900, last_year=2000, score=0.25, id=1,
        )
        return SearchResult(Status.OK, [phrase])

    monkeypatch.setattr(cli, "search", fake_search)
    return recorded


def test_prints_phrases(calls, capsys):
    code = cli.main(["I like ???", "--corpus", "eng-gb", "--topk", "10", "--tags"])
    assert code == cli.EXIT_OK
    assert capsys.readouterr().out.strip() == "0.250000 I_0 like_0 tea_1"

    query, options, _ = calls[0]
    assert query == "I like ???"
    assert options.corpus is Corpus.BRITISH_ENGLISH
    assert options.max_results == 10


def test_invalid_option_exits_with_error(calls, capsys):
    code = cli.main(["x", "--nmin", "0"])
    assert code == cli.EXIT_ERROR
    assert "min_phrase_length" in capsys.readouterr().err
    assert calls == []


def test_non_ok_status(monkeypatch, capsys):
    monkeypatch.setattr(cli, "search", lambda *a, **k: SearchResult.failed(Status.BAD_REQUEST))
    assert cli.main(["x"]) == cli.EXIT_NOT_OK
    assert "BAD_REQUEST" in capsys.readouterr().err


def test_transport_error(monkeypatch, capsys):
    def boom(*a, **k):
        raise TransportError("down")

    monkeypatch.setattr(cli, "search", boom)
    assert cli.main(["x"]) == cli.EXIT_ERROR
    assert "down" in capsys.readouterr().err


def test_unknown_corpus_rejected_by_parser():
    with pytest.raises(SystemExit):
        cli.main(["x", "--corpus", "klingon"])


def test_importing_main_module_does_not_run_cli(calls):
    import importlib

    importlib.import_module("phrasefinder.__main__")
    assert calls == []


def test_running_package_as_main(calls, monkeypatch, capsys):
    import runpy

    monkeypatch.setattr("sys.argv", ["phrasefinder", "I like ???"])
    with pytest.raises(SystemExit) as ei:
        runpy.run_module("phrasefinder", run_name="__main__")
    assert ei.value.code == cli.EXIT_OK
    assert "I like tea" in capsys.readouterr().out
    assert calls[0][0] == "I like ???"
