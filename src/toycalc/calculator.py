from enum import Enum


# Bounds both how many digits can be typed and the overflow threshold.
MAX_DIGITS = 8


class Operation(Enum):
    '''
    Pending arithmetic operation, valued by its key label.
    '''
    NOOP = ''
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'

    def __str__(self):
        return self.value


class Display(Enum):
    INPUT = 0
    ACCUMULATOR = 1


def _truncdiv(dividend, divisor):
    '''
    Integer division rounding toward zero, not toward negative infinity.
    '''
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


class Calculator:
    '''
    Four-function calculator engine.

    Takes key presses (digits, operators, equals) and keeps whatever a pocket
    calculator would: a running accumulator, the number being typed, and the
    last operator and operand so that pressing equals again repeats them.

    Errors (divide by zero, overflow) are not raised. They put the calculator
    in an error state, shown instead of a number until the next digit press.
    '''

    DIVIDE_BY_ZERO = 'error'
    OVERFLOW = 'overflow'

    def __init__(self):
        '''
        Create cleared calculator with no display listeners.
        '''
        self.listeners = []
        self.error_message = ''
        self._reset()

    def _reset(self):
        self.accumulator = 0
        self.input = 0
        self.stored_operand = 0
        self.current_operation = Operation.NOOP
        self.stored_operation = Operation.NOOP
        self.display = Display.INPUT
        self.equals_pressed = False
        self.error = False

    def press_digit(self, digit):
        '''
        Type a digit onto the number being entered.

        Starts over after equals or an error. Digits past MAX_DIGITS are
        dropped.

        :param digit: Integer in [0, 9].
        '''
        if self.equals_pressed or self.error:
            self._reset()

        if self.display is Display.ACCUMULATOR:
            self.display = Display.INPUT

        if self.input == 0:
            self.input = digit
        elif self.input < 10 ** (MAX_DIGITS - 1):
            self.input = self.input * 10 + digit

        self._update_display()

    def press_operation(self, operation):
        '''
        Finish the pending step, if any, and queue operation.
        '''
        if not self.equals_pressed:
            self.perform_operation()
            self.input = 0

        self.display = Display.ACCUMULATOR
        self.current_operation = operation
        self.equals_pressed = False

        self._update_display()

    def press_equals(self):
        '''
        Evaluate the pending operation.

        Pressed again straight after, reapplies the last operator and operand
        to the result: 5 + 3 = = shows 8, then 11.
        '''
        if self.equals_pressed:
            self.input = self.stored_operand
            self.current_operation = self.stored_operation

        self.perform_operation()
        self.stored_operation = self.current_operation
        self.current_operation = Operation.NOOP
        self.stored_operand = self.input
        self.equals_pressed = True
        self.display = Display.ACCUMULATOR
        self.input = 0

        self._update_display()

    def perform_operation(self):
        '''
        Apply current operation to accumulator and input, into accumulator.
        '''
        operation = self.current_operation
        if operation is Operation.NOOP:
            self.accumulator = self.input
        elif operation is Operation.ADD:
            self.accumulator += self.input
        elif operation is Operation.SUBTRACT:
            self.accumulator -= self.input
        elif operation is Operation.MULTIPLY:
            self.accumulator *= self.input
        elif operation is Operation.DIVIDE:
            if self.input == 0:
                self._fail(type(self).DIVIDE_BY_ZERO)
            else:
                self.accumulator = _truncdiv(self.accumulator, self.input)

        if abs(self.accumulator) >= 10 ** MAX_DIGITS:
            self._fail(type(self).OVERFLOW)

    def _fail(self, message):
        self.error = True
        self.error_message = message

    def add_display_listener(self, listener):
        '''
        Call listener with the display string after every key press.

        Listeners are called in the order they were added.
        '''
        self.listeners.append(listener)

    def get_display_string(self):
        if self.error:
            return self.error_message
        return str(self._display_value())

    def _display_value(self):
        if self.display is Display.ACCUMULATOR:
            return self.accumulator
        return self.input

    def _update_display(self):
        display_string = self.get_display_string()
        for listener in self.listeners:
            listener(display_string)
