from lark import Token, Transformer

from Syntax.errors import Span
from Syntax.tree import Node


class NodeBuilder(Transformer):
    """
    Transformer for argument notation.
    Converts the Lark parse tree into immutable Node values carrying the matched source text and span.
    Named terminals become leaf nodes whose kind is the lower-cased terminal name.
    """

    def __init__(self, source: str):
        super().__init__(visit_tokens=True)
        self.source = source

    def __default__(self, data, children, meta):
        if meta.empty:
            # only rules that matched nothing, such as an empty argument list
            return Node(kind=str(data), text="", span=None, children=tuple(children))
        span = Span(meta.start_pos, meta.end_pos, meta.line, meta.column)
        return Node(
            kind=str(data),
            text=self.source[meta.start_pos : meta.end_pos],
            span=span,
            children=tuple(children),
        )

    def __default_token__(self, token: Token):
        span = Span(token.start_pos, token.end_pos, token.line, token.column)
        return Node(kind=token.type.lower(), text=token.value, span=span)
