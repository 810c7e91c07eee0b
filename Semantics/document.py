import logging

from Semantics.emit import emit
from Semantics.header import parse_header
from Semantics.models import Document, Section
from Semantics.numbering import NumberingContext
from Syntax.errors import InternalError
from Syntax.parse import parse_notation

logger = logging.getLogger(__name__)


def parse_document(text: str) -> Document:
    """
    Translate a whole exercise sheet.

    Labels name the section in progress, premises are appended to it and a conclusion closes it.
    A trailing section that has premises but no conclusion is kept.
    """
    root = parse_notation(text)
    if root.kind != "root" or not root.children:
        raise InternalError(f"Unexpected rule {root.kind}", root.span)

    header, *entries = root.children
    document = parse_header(header)

    context = NumberingContext()
    sections = []
    current = Section()

    for node in entries:
        if node.kind == "label":
            current.label = node.text
            continue
        if node.kind not in ("arg", "conclusion"):
            raise InternalError(f"Unexpected rule {node.kind}\nContent: {node.text}", node.span)

        fragment = emit(node, context)
        if node.kind == "arg":
            current.premises.append(fragment)
        else:
            current.conclusion = fragment
            sections.append(current)
            logger.debug(f"Closed section '{current.label}' with {len(current.premises)} premises")
            current = Section()
            context.reset()

    if current.premises:
        sections.append(current)

    document.sections = sections
    return document
