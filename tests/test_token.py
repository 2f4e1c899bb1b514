from pestkit.position import Position
from pestkit.token import Token, TokenKind


def test_tokens_with_same_fields_are_equal():
    text = "abc"
    first = Token(TokenKind.START, "rule", Position(text, 1))
    second = Token(TokenKind.START, "rule", Position(text, 1))
    assert first == second
    assert hash(first) == hash(second)


def test_kind_distinguishes_tokens():
    text = "abc"
    start = Token(TokenKind.START, "rule", Position(text, 0))
    end = Token(TokenKind.END, "rule", Position(text, 0))
    assert not start == end
    assert len({start, end}) == 2


def test_position_distinguishes_tokens():
    text = "abc"
    first = Token(TokenKind.END, "rule", Position(text, 0))
    second = Token(TokenKind.END, "rule", Position(text, 3))
    assert not first == second


def test_fields_are_kept():
    text = "abc"
    pos = Position(text, 2)
    token = Token(TokenKind.END, "number", pos)
    assert token.kind is TokenKind.END
    assert token.rule == "number"
    assert token.pos.pos == 2