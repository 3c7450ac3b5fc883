'''
Keypad tests
'''

import regex

from toycalc.util import CalcError
from toycalc.keypad import Keypad
from toycalc.lexer import Lexer

from pytest import raises


def feed(keypad, line):
    lexer = Lexer()
    for match in lexer.lex(line):
        if lexer.isfeedable(match):
            keypad.feed(lexer.matchedgroups(match))


def test_feed():
    keypad = Keypad()
    feed(keypad, '8 * 3 / 2 =')
    assert keypad.display == '12'


def test_shares_calculator(calc, displays):
    keypad = Keypad(calc)
    feed(keypad, '12+')
    assert keypad.calculator is calc
    assert displays == ['1', '12', '12']


def test_parse_space():
    keypad = Keypad()
    with raises(CalcError, match='No key for space'):
        keypad.parse({'space': ' '})


def test_listener_failure(calc):
    def broken(shown):
        raise ValueError(shown)
    calc.add_display_listener(broken)
    keypad = Keypad(calc)
    with raises(CalcError, match=regex.escape('Cannot press 9')):
        keypad.feed({'digit': '9'})
