import pytest

from wordpass.errors import EmptyWordListError, SourceUnavailableError
from wordpass.wordlist import (
    FileWordSource,
    StaticWordSource,
    filter_words,
    is_valid_word,
    load_wordlist,
    reject_reason,
)


def test_filter_drops_capitalized_and_apostrophe_lines():
    words, stats = filter_words(["Apple\n", "o'hare\n", "berry\n", "cherry\n"])

    assert words == ["berry", "cherry"]
    assert stats["capitalized"] == 1
    assert stats["apostrophe"] == 1
    assert stats["kept"] == 2
    assert stats["total"] == 4


def test_filter_strips_trailing_whitespace():
    words, _ = filter_words(["alpha\n", "beta  \n", "gamma\r\n", "delta\t"])

    assert words == ["alpha", "beta", "gamma", "delta"]
    assert all(w == w.rstrip() for w in words)


def test_filter_drops_blank_lines():
    words, stats = filter_words(["\n", "   \n", "", "kiwi\n"])

    assert words == ["kiwi"]
    assert stats["blank"] == 3


def test_filter_keeps_lowercase_with_inner_capitals():
    words, _ = filter_words(["iPhone\n", "McIntosh\n"])

    assert words == ["iPhone"]


def test_filter_apostrophe_anywhere_in_line():
    words, _ = filter_words(["dogs'\n", "'tis\n", "can't\n", "cant\n"])

    assert words == ["cant"]


def test_filter_min_length():
    words, stats = filter_words(["a\n", "an\n", "ant\n", "antler\n"], min_length=3)

    assert words == ["ant", "antler"]
    assert stats["too_short"] == 2


def test_filter_verbose_prints_stats(capsys):
    filter_words(["Zebra\n", "yak\n"], verbose=True)

    out = capsys.readouterr().out
    assert "filtering stats" in out
    assert "capitalized:" in out


@pytest.mark.parametrize(
    "line, expected",
    [
        ("berry\n", True),
        ("Berry\n", False),
        ("berry's\n", False),
        ("\n", False),
        ("émigré\n", True),
        ("Émigré\n", False),
        (" Apple\n", False),
        ("  kiwi\n", True),
    ],
)
def test_is_valid_word(line, expected):
    assert is_valid_word(line) is expected


def test_load_wordlist_from_file(tmp_path):
    path = tmp_path / "words"
    path.write_text("Aaron\naardvark\naardvark's\nabacus\n", encoding="utf-8")

    words, stats = load_wordlist(FileWordSource(path))

    assert words == ["aardvark", "abacus"]
    assert stats["total"] == 4


def test_load_wordlist_missing_file(tmp_path):
    missing = tmp_path / "nope" / "words"

    with pytest.raises(SourceUnavailableError) as exc:
        load_wordlist(FileWordSource(missing))

    assert exc.value.path == missing
    assert str(missing) in str(exc.value)


def test_load_wordlist_directory_is_unavailable(tmp_path):
    with pytest.raises(SourceUnavailableError):
        FileWordSource(tmp_path).read_lines()


def test_load_wordlist_empty_after_filtering():
    source = StaticWordSource(["Apple\n", "o'hare\n", "\n"])

    with pytest.raises(EmptyWordListError) as exc:
        load_wordlist(source)

    assert exc.value.total == 3


def test_load_wordlist_empty_source():
    with pytest.raises(EmptyWordListError):
        load_wordlist(StaticWordSource([]))


def test_static_source_returns_copy():
    source = StaticWordSource(["fig\n"])
    lines = source.read_lines()
    lines.append("plum\n")

    assert source.read_lines() == ["fig\n"]


def test_filter_leading_whitespace_before_capital_is_rejected():
    words, stats = filter_words([" Apple\n", "\tBerry\n", "  cherry\n"])

    assert words == ["cherry"]
    assert stats["capitalized"] == 2
    assert all(w == w.strip() for w in words)


@pytest.mark.parametrize(
    "line, reason",
    [
        ("o'hare\n", "apostrophe"),
        ("Apple\n", "capitalized"),
        ("  \n", "blank"),
        ("ox\n", "too_short"),
        ("oxen\n", None),
    ],
)
def test_reject_reason_matches_filter_counters(line, reason):
    assert reject_reason(line, min_length=3) == reason

    _, stats = filter_words([line], min_length=3)
    if reason is None:
        assert stats["kept"] == 1
    else:
        assert stats[reason] == 1
    assert is_valid_word(line, min_length=3) is (reason is None)


def test_load_wordlist_rejects_non_utf8_file(tmp_path):
    path = tmp_path / "words"
    path.write_bytes(b"caf\xe9\nber\xfcht\n")

    with pytest.raises(SourceUnavailableError) as exc:
        load_wordlist(FileWordSource(path))

    assert "not valid utf-8" in str(exc.value)
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)
