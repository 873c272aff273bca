"""Tests for the candidate pattern."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from cpr_filter.patterns import find_candidates


def _texts(text):
    return [c.text for c in find_candidates(text)]


# ── Accepted layouts ─────────────────────────────────────────────────

def test_dashed():
    candidates = list(find_candidates("CPR: 010203-1234."))
    assert len(candidates) == 1
    assert candidates[0].text == "010203-1234"
    assert (candidates[0].start, candidates[0].end) == (5, 16)
    assert candidates[0].digits == "0102031234"


def test_plain_digits():
    assert _texts("nr 0707614285 ok") == ["0707614285"]


def test_date_separators():
    assert _texts("01.02.03-1234") == ["01.02.03-1234"]
    assert _texts("01/02/03 1234") == ["01/02/03 1234"]
    assert _texts("01 02 03 1234") == ["01 02 03 1234"]
    assert _texts("07\t07\t61 4285") == ["07\t07\t61 4285"]


def test_serial_gap():
    assert _texts("010203 / 1234") == ["010203 / 1234"]
    assert _texts("010203  -  1234") == ["010203  -  1234"]
    assert _texts("010203  1234") == ["010203  1234"]


def test_gap_too_wide():
    assert _texts("010203   1234") == []
    assert _texts("010203 -   1234") == []


def test_mixed_date_separators_rejected():
    assert _texts("01.02-03-1234") == []
    assert _texts("01-0203-1234") == []


# ── False positive guards ────────────────────────────────────────────

def test_not_preceded_by_digit():
    assert _texts("1010011-2002") == []


def test_longer_digit_run():
    assert _texts("32130112345") == []
    assert _texts("12345678901") == []


def test_followed_by_word_character():
    assert _texts("0707614285abc") == []
    assert _texts("0707614285_") == []


def test_followed_by_punctuation():
    assert _texts("(0707614285)") == ["0707614285"]


def test_only_ascii_digits():
    assert _texts("٠٧٠٧٦١٤٢٨٥") == []


def test_empty_text():
    assert _texts("") == []


# ── Sequence behaviour ───────────────────────────────────────────────

def test_left_to_right_order():
    text = "a 070761-4285 b 0101010090 c"
    candidates = list(find_candidates(text))
    assert [c.text for c in candidates] == ["070761-4285", "0101010090"]
    assert candidates[0].start < candidates[1].start
    for c in candidates:
        assert text[c.start:c.end] == c.text


def test_lazy_and_restartable():
    text = "070761-4285 and 0101010090"
    it = find_candidates(text)
    assert iter(it) is it
    assert [c.text for c in it] == [c.text for c in find_candidates(text)]
