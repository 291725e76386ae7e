import pytest

from shellhist.cursor import Cursor, WordJumper, WordJumpMode

EMACS = WordJumper(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789",
    WordJumpMode.EMACS,
)
SUBL = WordJumper("./\\()\"'-:,.;<>~!@#$%^&*|+=[]{}`~?", WordJumpMode.SUBL)

SAMPLE = "   aaa   ((()))bbb   ((()))   "
UMLAUTS = "öaöböcödöeöfö"


def test_right():
    c = Cursor(UMLAUTS)
    for expected in [0, 2, 3, 5, 6, 8, 9, 11, 12, 14, 15, 17, 18, 20, 20, 20, 20]:
        assert c.byte_index() == expected
        c.right()


def test_left():
    c = Cursor(UMLAUTS)
    c.end()
    for expected in [20, 18, 17, 15, 14, 12, 11, 9, 8, 6, 5, 3, 2, 0, 0, 0, 0]:
        assert c.byte_index() == expected
        c.left()


@pytest.mark.parametrize("src, dest", [(0, 6), (3, 6), (7, 18), (19, 30)])
def test_emacs_next_word_pos(src, dest):
    assert EMACS.next_word_pos(SAMPLE, src) == dest


@pytest.mark.parametrize("src, dest", [(30, 15), (29, 15), (15, 3), (3, 0)])
def test_emacs_prev_word_pos(src, dest):
    assert EMACS.prev_word_pos(SAMPLE, src) == dest


@pytest.mark.parametrize("src, dest", [(0, 3), (1, 3), (3, 9), (9, 15), (15, 21), (21, 30)])
def test_subl_next_word_pos(src, dest):
    assert SUBL.next_word_pos(SAMPLE, src) == dest


@pytest.mark.parametrize("src, dest", [(30, 21), (21, 15), (15, 9), (9, 3), (3, 0)])
def test_subl_prev_word_pos(src, dest):
    assert SUBL.prev_word_pos(SAMPLE, src) == dest


@pytest.mark.parametrize("jumper", [EMACS, SUBL])
def test_empty_string_positions(jumper):
    assert jumper.next_word_pos("", 0) == 0
    assert jumper.prev_word_pos("", 0) == 0


def test_pop():
    chars = list(UMLAUTS)
    c = Cursor(UMLAUTS)
    c.end()
    while chars:
        assert c.back() == chars.pop()
        assert c.substring() == "".join(chars)
    assert c.back() is None
    assert c.source == ""


def test_back():
    c = Cursor(UMLAUTS)
    for _ in range(4):
        c.right()
    assert c.substring() == "öaöb"
    assert c.back() == "b"
    assert c.back() == "ö"
    assert c.back() == "a"
    assert c.back() == "ö"
    assert c.back() is None
    assert c.source == "öcödöeöfö"


def test_insert():
    c = Cursor(UMLAUTS)
    for _ in range(4):
        c.right()
    assert c.substring() == "öaöb"
    for ch in "ögöh":
        c.insert(ch)
    assert c.substring() == "öaöbögöh"
    assert c.source == "öaöbögöhöcödöeöfö"


def test_char_and_remove():
    c = Cursor("ab")
    assert c.char() == "a"
    assert c.remove() == "a"
    assert c.source == "b"
    c.end()
    assert c.char() is None
    assert c.remove() is None
    assert c.source == "b"


def test_clear_and_start():
    c = Cursor("hello")
    c.end()
    c.start()
    assert c.index == 0
    c.clear()
    assert c.source == "" and c.index == 0


def test_word_moves_match_jumper():
    c = Cursor(SAMPLE)
    c.next_word(EMACS.word_chars, WordJumpMode.EMACS)
    assert c.index == EMACS.next_word_pos(SAMPLE, 0)
    c.end()
    c.prev_word(SUBL.word_chars, WordJumpMode.SUBL)
    assert c.index == SUBL.prev_word_pos(SAMPLE, len(SAMPLE))


def test_remove_prev_word():
    c = Cursor("foo bar")
    c.end()
    c.remove_prev_word(EMACS.word_chars, WordJumpMode.EMACS)
    assert c.source == "foo "
    assert c.index == 4


def test_remove_next_word():
    c = Cursor(SAMPLE)
    c.remove_next_word(EMACS.word_chars, WordJumpMode.EMACS)
    assert c.source == SAMPLE[6:]
    assert c.index == 0