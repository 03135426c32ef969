from functools import wraps


class FormulaError(Exception):
    '''
    Base of all errors raised while parsing or evaluating a formula.

    The formula text is attached by FormulaParser.calculate, for diagnostics.
    '''
    formula = None

    def __str__(self):
        message = super().__str__()
        if self.formula is None:
            return message
        return '{} in {!r}'.format(message, self.formula)


class LexError(FormulaError):
    pass


class UnknownIdentifierError(FormulaError):
    pass


class StackUnderflow(FormulaError):
    pass


class UnmatchedParenthesis(StackUnderflow):
    pass


class TypeCoercionError(FormulaError):
    pass


class EvaluationError(FormulaError):
    pass


def wrap_user_errors(error, fmt):
    '''
    Decorator that converts builtin exceptions into the given FormulaError.

    Passes through FormulaErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except FormulaError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
