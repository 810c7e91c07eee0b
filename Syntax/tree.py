from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from Syntax.errors import ArityError, Span


@dataclass(frozen=True)
class Node:
    """A parse tree node: the rule that matched, its source text and its children."""

    kind: str
    text: str
    span: Optional[Span]
    children: Tuple["Node", ...] = field(default=())


def extract_with_excess(node: Node, count: int, message: str) -> Tuple[Tuple[Node, ...], List[Node]]:
    """
    Split the children of a node into the first `count` and whatever is left over.

    Raises ArityError when the node has fewer than `count` children.
    """
    children = list(node.children)
    if len(children) < count:
        raise ArityError(
            f"{message}: expected at least {count} children, got {len(children)}. Matched {node.kind}",
            node.span,
        )
    return tuple(children[:count]), children[count:]


def extract(node: Node, count: int, message: str) -> Tuple[Node, ...]:
    """Return exactly `count` children of a node, raising ArityError on any mismatch."""
    required, extra = extract_with_excess(node, count, message)
    if extra:
        raise ArityError(
            f"{message}: expected exactly {count} children, got {count + len(extra)}. Matched {node.kind}",
            node.span,
        )
    return required


def format_tree(node: Node, level: int = 0) -> str:
    """Render a tree one node per block, indented by depth."""
    indent = "   " * level
    span = node.span
    where = "-" if span is None else f"{span.start}..{span.end} (line {span.line}, column {span.column})"
    lines = [
        f"{indent} Rule:    {node.kind}",
        f"{indent} Span:    {where}",
        f"{indent} Text:    {node.text}",
    ]
    blocks = [format_tree(child, level + 1) for child in node.children]
    if blocks:
        separator = "\n\n" if len(blocks) > 1 else "\n"
        lines.append(separator.join(blocks))
    return "\n".join(lines)
