from functools import wraps


class CalcError(Exception):
    '''
    Bad user input. args[0] is the message to show the user.
    '''
    pass


class LexError(CalcError):
    pass


class UnmatchedParenError(CalcError):
    pass


class MismatchedParenError(CalcError):
    pass


class EvaluationError(CalcError):
    pass


def wrap_user_errors(fmt, error=CalcError):
    '''
    Ugly hack decorator that converts exceptions to user errors.

    Passes through CalcErrors. Anything else is re-raised as error, with the
    message built from fmt and the call arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
