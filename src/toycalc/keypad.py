from functools import partial

from .util import CalcError, wrap_user_errors
from .calculator import Calculator, Operation


class Keypad:
    '''
    The calculator's buttons.

    Takes lexemes and presses the matching key on one calculator, the way a
    button's click handler would.
    '''

    def __init__(self, calculator=None):
        '''
        Create keypad wired to calculator.

        :param calculator: Calculator to press keys on. A fresh one if None.
        '''
        if calculator is None:
            calculator = Calculator()
        self.calculator = calculator

    @property
    def display(self):
        return self.calculator.get_display_string()

    def feed(self, groups):
        '''
        Press the key for a lexeme.

        :param groups: Matched groups of a lexeme, see Lexer.matchedgroups.
        '''
        press = self.parse(groups)
        self._press(''.join(groups.values()), press)

    def parse(self, groups):
        '''
        Parse lexeme groups into a ready to call key press.

        :param groups: Matched groups of a lexeme, see Lexer.matchedgroups.
        '''
        if 'digit' in groups:
            return partial(self.calculator.press_digit, int(groups['digit']))
        elif 'operator' in groups:
            return partial(self.calculator.press_operation,
                           Operation(groups['operator']))
        elif 'equals' in groups:
            return self.calculator.press_equals
        raise CalcError('No key for {0}'.format(', '.join(groups.keys())))

    @wrap_user_errors('Cannot press {1}')
    def _press(self, key, press):
        press()
