from types import MappingProxyType

import numpy as np

from .common import ARGUMENT_MISMATCH, UNKNOWN_FUNCTION, UNKNOWN_VARIABLE
from .common import EvalError, trace
from .parser import parse
from .tree import Node


CONSTANTS = MappingProxyType({
    'e': np.e,
    'pi': np.pi,
})

UNARY_FUNCTIONS = MappingProxyType({
    'sin': np.sin,
    'cos': np.cos,
    'tan': np.tan,
    'log': np.log,
    'exp': np.exp,
    'sqrt': np.sqrt,
    'asin': np.arcsin,
    'acos': np.arccos,
    'atan': np.arctan,
    'sinh': np.sinh,
    'cosh': np.cosh,
    'tanh': np.tanh,
    'asinh': np.arcsinh,
    'acosh': np.arccosh,
    'atanh': np.arctanh,
})

BINARY_FUNCTIONS = MappingProxyType({
    'pow': np.power,
})


def unreachable(tree):
    if isinstance(tree, Node):
        return AssertionError(f"unexpected {tree.label} node with {len(tree.children)} children")
    return AssertionError(f"unexpected leaf {tree!r}")


def collect_arguments(tree, source):
    if not isinstance(tree, Node) or tree.label != 'arguments':
        raise unreachable(tree)

    children = tree.children

    if len(children) == 1:
        return [_eval(children[0], source)]

    elif len(children) == 3:
        return collect_arguments(children[0], source) + [_eval(children[2], source)]

    raise unreachable(tree)


@trace
def call(tree, source):
    name_tree, _, args_tree, _ = tree.children
    name = name_tree.text(source)
    args = collect_arguments(args_tree, source)

    if len(args) == 1:
        if name not in UNARY_FUNCTIONS:
            raise EvalError(UNKNOWN_FUNCTION, name_tree.span)
        return UNARY_FUNCTIONS[name](*args)

    elif len(args) == 2:
        if name not in BINARY_FUNCTIONS:
            raise EvalError(UNKNOWN_FUNCTION, name_tree.span)
        return BINARY_FUNCTIONS[name](*args)

    raise EvalError(ARGUMENT_MISMATCH, tree.span)


def _eval(tree, source):
    if not isinstance(tree, Node):
        raise unreachable(tree)

    label = tree.label
    children = tree.children
    n = len(children)

    if label in ('sum', 'product', 'power', 'atom') and n == 1:
        return _eval(children[0], source)

    elif label == 'sum' and n == 3:
        op = children[1].text(source)
        left = _eval(children[0], source)
        right = _eval(children[2], source)
        if op == '+':
            return left + right
        elif op == '-':
            return left - right

    elif label == 'product' and n == 3:
        op = children[1].text(source)
        left = _eval(children[0], source)
        right = _eval(children[2], source)
        if op == '*':
            return left * right
        elif op == '/':
            return left / right

    elif label == 'power' and n == 2:
        op = children[0].text(source)
        operand = _eval(children[1], source)
        if op == '+':
            return operand
        elif op == '-':
            return -operand

    elif label == 'power' and n == 3:
        base = _eval(children[0], source)
        exponent = _eval(children[2], source)
        return np.power(base, exponent)

    elif label == 'brackets' and n == 3:
        return _eval(children[1], source)

    elif label in ('integer', 'real'):
        return np.float64(tree.text(source))

    elif label == 'variable' and n == 1:
        name = tree.text(source)
        if name not in CONSTANTS:
            raise EvalError(UNKNOWN_VARIABLE, tree.span)
        return np.float64(CONSTANTS[name])

    elif label == 'function' and n == 4:
        return call(tree, source)

    raise unreachable(tree)


@trace
def evaluate(tree, source):
    # inf and nan are results, not warnings
    with np.errstate(all='ignore'):
        return float(_eval(tree, source))


def solve(source):
    return evaluate(parse(source), source)
