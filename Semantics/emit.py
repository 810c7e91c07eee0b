from Semantics.numbering import MAX_PREMISE_NUMBER, NumberingContext
from Syntax.errors import InternalError, ValidationError
from Syntax.tree import Node, extract, extract_with_excess

QUANTIFIERS = {"@": r"\forall ", "&": r"\exists "}
CONNECTIVES = {"->": r"\rightarrow ", "^": r"\land ", "V": r"\lor ", "v": r"\lor "}

# consumed by the header parser only
HEADER_KINDS = {"root", "header", "header_label", "header_line", "header_key", "header_value"}


def parse_premise_number(token: Node) -> int:
    """Read a premise number as an unsigned 16-bit integer."""
    try:
        number = int(token.text)
    except ValueError as e:
        raise ValidationError(f"invalid digit found in premise number '{token.text}'", token.span) from e
    if number < 0 or number > MAX_PREMISE_NUMBER:
        raise ValidationError(f"premise number '{token.text}' is too large", token.span)
    return number


def escape_operand(text: str) -> str:
    return text.replace("_", r"\_")


def emit(node: Node, context: NumberingContext) -> str:
    """Translate one parse tree node into a LaTeX fragment, advancing `context` on every premise."""
    kind = node.kind

    if kind == "existencial":
        if node.text not in QUANTIFIERS:
            raise InternalError(f"Unknown quantifier {node.text!r}", node.span)
        return QUANTIFIERS[node.text]

    elif kind == "arg":
        (number, formula), rest = extract_with_excess(node, 2, "arg params")
        context.advance(parse_premise_number(number), node.span)
        body = emit(formula, context)
        if not rest:
            return rf"\argument{{{body}}}"
        if len(rest) == 1:
            return rf"\argument[{emit(rest[0], context)}]{{{body}}}"
        raise InternalError(f"Premise has {len(rest)} justifications", node.span)

    elif kind == "line_ext":
        return node.text

    elif kind == "bioperator":
        if node.text not in CONNECTIVES:
            raise InternalError(f"Unknown connective {node.text!r}", node.span)
        return CONNECTIVES[node.text]

    elif kind == "neg":
        (expr,) = extract(node, 1, "neg params")
        return rf"\lnot {emit(expr, context)}"

    elif kind == "conclusion":
        (expr,) = extract(node, 1, "conclusion args")
        return rf"\conclusion{{{emit(expr, context)}}}"

    elif kind == "subexpr":
        (expr,) = extract(node, 1, "subexpr params")
        return f"({emit(expr, context)})"

    elif kind == "operand":
        return escape_operand(node.text)

    elif kind == "func":
        (name, args), _ = extract_with_excess(node, 2, "func params")
        arguments = ", ".join(emit(arg, context) for arg in args.children)
        return rf"\pred{{{emit(name, context)}}}{{{arguments}}}"

    elif kind in HEADER_KINDS:
        raise InternalError(f"Rule {kind} cannot be emitted", node.span)

    # grouping rules: translate the leaves, keep the structure
    return "".join(emit(child, context) for child in node.children)
