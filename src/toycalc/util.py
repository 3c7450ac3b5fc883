from functools import wraps


class CalcError(Exception):
    '''
    Bad user input to the front end: unknown keys and the like.

    Arithmetic errors never raise this; the calculator shows them instead.
    '''


def wrap_user_errors(fmt):
    '''
    Decorator that converts unexpected exceptions to CalcErrors.

    Passes through CalcErrors. fmt is formatted with the call's arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise CalcError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator
