'''
Key lexer tests
'''

import regex

from toycalc.util import CalcError
from toycalc.lexer import Lexer

from pytest import raises


def test_keys():
    l = Lexer()
    matches = list(l.lex('12+3 ='))
    assert [m.group(0) for m in matches] == ['1', '2', '+', '3', ' ', '=']
    assert [list(l.matchedgroups(m)) for m in matches] == [
        ['digit'], ['digit'], ['operator'], ['digit'], ['space'], ['equals'],
    ]


def test_all_operators():
    l = Lexer()
    matches = l.lex('+-*/')
    assert [l.matchedgroups(m) for m in matches] == [
        {'operator': '+'},
        {'operator': '-'},
        {'operator': '*'},
        {'operator': '/'},
    ]


def test_space_not_feedable():
    l = Lexer()
    space, digit = l.lex('\t9')
    assert not l.isfeedable(space)
    assert l.isfeedable(digit)


def test_unknown_key():
    l = Lexer()
    with raises(CalcError, match=regex.escape("Couldn't lex x=")):
        list(l.lex('5+x='))


def test_yields_before_unknown_key():
    l = Lexer()
    matches = l.lex('5%')
    assert next(matches).group(0) == '5'
    with raises(CalcError, match=regex.escape("Couldn't lex %")):
        next(matches)


def test_non_ascii_digits():
    l = Lexer()
    with raises(CalcError, match=regex.escape("Couldn't lex ５")):
        list(l.lex('５'))
    with raises(CalcError, match=regex.escape("Couldn't lex ٣=")):
        list(l.lex('٣='))
