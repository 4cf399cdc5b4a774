# tests/test_corpus.py
import pytest

from markov_textgen.corpus import normalize_corpus, read_corpus
from markov_textgen.errors import CorpusError, MarkovTextgenError


def test_normalize_strips_carriage_returns():
    assert normalize_corpus("a\r\nb\rc") == "a\nbc"
    assert normalize_corpus("") == ""
    assert normalize_corpus(None) is None


def test_read_corpus_normalizes_crlf(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_bytes("one\r\ntwo\r\n".encode("utf-8"))
    assert read_corpus(path) == "one\ntwo\n"


def test_read_corpus_accepts_str_path(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("héllo", encoding="utf-8")
    assert read_corpus(str(path)) == "héllo"


def test_read_corpus_missing_file(tmp_path):
    with pytest.raises(CorpusError) as exc:
        read_corpus(tmp_path / "nope.txt")
    assert isinstance(exc.value, MarkovTextgenError)


def test_read_corpus_bad_encoding(tmp_path):
    path = tmp_path / "latin.txt"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(CorpusError):
        read_corpus(path, encoding="utf-8")
