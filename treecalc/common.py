from functools import wraps
import sys

TRACE = False

depth = 0


def trace(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        global depth

        if not TRACE:
            return f(*args, **kwargs)

        print(f"{'  '*depth}{f.__name__} <- {args} {kwargs}", file=sys.stderr)
        depth += 1

        try:
            ret = f(*args, **kwargs)
        finally:
            depth -= 1

        print(f"{'  '*depth}{f.__name__} -> {ret}", file=sys.stderr)

        return ret

    return wrapper


EMPTY_INPUT = 'empty input'
UNEXPECTED_CHARACTER = 'unexpected character'
UNEXPECTED_END = 'unexpected end of input'

UNKNOWN_VARIABLE = 'unknown variable'
UNKNOWN_FUNCTION = 'unknown function'
ARGUMENT_MISMATCH = 'argument mismatch'


class ExprError(Exception):
    def __init__(self, reason, span):
        super().__init__(reason)
        self.reason = reason
        self.span = span

    def __repr__(self):
        return f"{type(self).__name__}('{self.reason}', {self.span})"


class ParseError(ExprError):
    pass


class EvalError(ExprError):
    pass
