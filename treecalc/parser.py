from lark import Lark, Token
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF

from .common import EMPTY_INPUT, UNEXPECTED_CHARACTER, UNEXPECTED_END
from .common import ParseError, trace
from .tree import Leaf, Node


GRAMMAR = """
sum        ::= sum binop-add-sub product | product
product    ::= power | product binop-mul-div power
power      ::= atom | atom binop-pow power | unop power
atom       ::= brackets | integer | real | variable | function
brackets   ::= '(' sum ')'
binop-add-sub ::= '+' | '-'
binop-mul-div ::= '*' | '/'
binop-pow  ::= '^'
unop       ::= '+' | '-'
integer    ::= integer digit | digit
real       ::= integer '.' integer
digit      ::= '0'..'9'
variable   ::= string
function   ::= string '(' arguments ')'
arguments  ::= sum | arguments ',' sum
string     ::= string letter | letter
letter     ::= 'A'..'Z' | 'a'..'z'
"""


# GRAMMAR in lark notation, '-' in rule names becomes '_'
LARK_GRAMMAR = r"""
sum: sum binop_add_sub product | product
product: power | product binop_mul_div power
power: atom | atom binop_pow power | unop power
atom: brackets | integer | real | variable | function
brackets: "(" sum ")"
binop_add_sub: "+" | "-"
binop_mul_div: "*" | "/"
binop_pow: "^"
unop: "+" | "-"
integer: integer digit | digit
real: integer "." integer
digit: DIGIT
variable: string
function: string "(" arguments ")"
arguments: sum | arguments "," sum
string: string letter | letter
letter: LETTER

DIGIT: "0".."9"
LETTER: "A".."Z" | "a".."z"
"""


earley = Lark(LARK_GRAMMAR, start='sum', parser='earley', keep_all_tokens=True)


def convert(tree):
    if isinstance(tree, Token):
        return Leaf(tree.start_pos, tree.start_pos + len(tree))

    label = str(tree.data).replace('_', '-')
    return Node(label, [convert(c) for c in tree.children])


@trace
def parse(source):
    if not source:
        raise ParseError(EMPTY_INPUT, (0, 0))

    try:
        tree = earley.parse(source)
    except UnexpectedCharacters as e:
        pos = e.pos_in_stream
        raise ParseError(UNEXPECTED_CHARACTER, (pos, pos + 1)) from e
    except UnexpectedEOF as e:
        end = len(source)
        raise ParseError(UNEXPECTED_END, (end, end)) from e

    return convert(tree)
