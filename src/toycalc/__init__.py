'''
Four-function calculator.

Type digits and operators the way you'd press them on a pocket calculator:
chained operations apply left to right, no precedence, integers only, and
pressing = again repeats the last operation on the result.

    $ toycalc -e '5+6-3=' '=' '='
    8
    5
    2

Displays "error" on division by zero and "overflow" once a result no longer
fits in MAX_DIGITS digits; pressing any digit clears either.
'''

from .calculator import Calculator, Operation, MAX_DIGITS
from .cli import CLI
from .keypad import Keypad
from .lexer import Lexer


__all__ = 'Calculator', 'Operation', 'MAX_DIGITS', 'Keypad', 'Lexer', 'CLI'
