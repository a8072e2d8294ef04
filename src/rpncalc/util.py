from functools import wraps


class RPNError(Exception):
    pass


class CalculationError(RPNError):
    '''
    Bad user input or undefined arithmetic.

    Reported to the user, then the session stops or resets.
    '''


class InputError(RPNError):
    '''
    Input stream failed for some reason other than running out.
    '''


class LogicError(RPNError):
    '''
    Should be unreachable. If you see one of these, it's a bug.
    '''


def wrap_user_errors(fmt):
    '''
    Ugly hack decorator that converts exceptions to calculation errors.

    Passes through RPNErrors, so LogicErrors stay fatal.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise CalculationError(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
