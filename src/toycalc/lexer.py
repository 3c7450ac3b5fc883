from functools import reduce
import operator

import regex

from .util import CalcError
from .calculator import Operation


class Lexer:
    '''
    Lexer for calculator key presses, a *regular* grammar.

    Every key is a single character, so a line like "12+3=" is just the keys
    pressed in order. Holds no internal state.
    '''
    DIGIT = r'[0-9]'

    # NOOP has an empty label and is never pressed.
    assert not [operation
                for operation
                in Operation
                if operation is not Operation.NOOP and
                   len(operation.value) != 1]
    OPERATOR = r'(?:' + r'|'.join(regex.escape(operation.value)
                                  for operation
                                  in Operation
                                  if operation is not Operation.NOOP) + r')'
    EQUALS = r'='
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<digit>' + DIGIT + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<equals>' + EQUALS + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Yields every lexeme up to the first bad one, then raises CalcError.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise CalcError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to a keypad.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the named groups the lexeme matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
