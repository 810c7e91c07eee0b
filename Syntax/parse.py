import logging

from lark import Lark
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from Syntax.errors import NotationSyntaxError, Span
from Syntax.transform import NodeBuilder
from Syntax.tree import Node

"""Syntax for logic exercise sheets: a config header followed by labelled blocks of numbered premises and a conclusion"""

notation_grammar = r"""
root: _NL? header _entry*

_entry: _HASH LABEL _NL
      | arg
      | conclusion

header: header_label _NL header_line*
header_label: "[" NAME "]"
header_line: HEADER_KEY ":" HEADER_VALUE _NL

arg: NUMBER ":" formula ("[" LINE_EXT "]")? _NL
conclusion: _THEREFORE formula _NL

formula: _unary (BIOPERATOR _unary)*

_unary: neg
      | quantified
      | subexpr
      | func
      | OPERAND
      | "`" LINE_EXT "`"

neg: _NEG _unary
quantified: EXISTENCIAL OPERAND _unary
subexpr: "(" formula ")"
func: OPERAND "(" args ")"
args: (formula ("," formula)*)?

EXISTENCIAL: "@" | "&"
BIOPERATOR: "->" | "^" | "V" | "v"
_NEG: "~" | "¬"
_THEREFORE: "|-" | "∴"
_HASH: "#"

NUMBER: /[0-9]+/
OPERAND: /[A-Za-z0-9_']+/
NAME: /[^\s\]](?:[^\]\r\n]*[^\s\]])?/
HEADER_KEY: /[A-Za-z_][A-Za-z0-9_-]*/
HEADER_VALUE: /[^\r\n]+/
LABEL: /[^\s](?:[^\r\n]*[^\s])?/
LINE_EXT: /[^`\[\]\s](?:[^`\[\]\r\n]*[^`\[\]\s])?/

_NL: /(\r?\n[\t ]*)+/

%import common.WS_INLINE
%ignore WS_INLINE
"""

# setup parser
parser = Lark(
    notation_grammar,
    start="root",
    parser="lalr",
    lexer="contextual",
    propagate_positions=True,
)

logger = logging.getLogger(__name__)

TERMINAL_DESCRIPTIONS = {
    "_NL": "end of line",
    "_HASH": "'#'",
    "_THEREFORE": "'|-'",
    "_NEG": "'~'",
    "NUMBER": "premise number",
    "OPERAND": "operand",
    "NAME": "header label",
    "HEADER_KEY": "configuration key",
    "HEADER_VALUE": "configuration value",
    "LABEL": "label text",
    "LINE_EXT": "literal text",
    "EXISTENCIAL": "quantifier",
    "BIOPERATOR": "connective",
    "$END": "end of input",
}


def describe_terminal(name: str) -> str:
    """Human readable name for a grammar terminal."""
    if name in TERMINAL_DESCRIPTIONS:
        return TERMINAL_DESCRIPTIONS[name]
    try:
        pattern = parser.get_terminal(name).pattern
    except KeyError:
        return name
    if pattern.type == "str":
        return repr(pattern.value)
    return name.lower()


def _span_at(error: UnexpectedInput, source: str) -> Span:
    pos = error.pos_in_stream
    if pos is None or pos < 0 or pos > len(source):
        pos = len(source)
    end = min(pos + 1, len(source))
    if isinstance(error.line, int) and error.line > 0 and isinstance(error.column, int):
        return Span(pos, end, error.line, error.column)
    # end of input carries no position
    return Span(pos, end, source.count("\n", 0, pos) + 1, pos - (source.rfind("\n", 0, pos) + 1) + 1)


def _syntax_error(error: UnexpectedInput, source: str) -> NotationSyntaxError:
    if isinstance(error, UnexpectedCharacters):
        expected = error.allowed or set()
        found = repr(source[error.pos_in_stream]) if error.pos_in_stream < len(source) else "end of input"
    elif isinstance(error, UnexpectedToken):
        expected = error.expected or set()
        found = "end of input" if error.token.type == "$END" else repr(error.token.value)
    else:
        expected = getattr(error, "expected", None) or set()
        found = "end of input"

    span = _span_at(error, source)
    wanted = ", ".join(sorted(describe_terminal(name) for name in expected))
    message = f"Unexpected {found}"
    if wanted:
        message += f", expected one of: {wanted}"
    return NotationSyntaxError(message, span, expected=expected)


def parse_notation(text: str) -> Node:
    """Parse a whole exercise sheet into its root node, raising NotationSyntaxError on malformed input."""
    source = text if text.endswith("\n") else text + "\n"
    try:
        tree = parser.parse(source)
    except UnexpectedInput as e:
        raise _syntax_error(e, source) from e

    root = NodeBuilder(source).transform(tree)
    logger.debug(f"Parsed {len(root.children) - 1} entries after the header")
    return root
