from typing import Dict

from Semantics.models import Document
from Syntax.errors import InternalError, ValidationError
from Syntax.tree import Node, extract, extract_with_excess

CONFIG_KEY_NAME = "config"
CONFIG_KEYS = ("title", "date", "author")


def parse_header(header: Node) -> Document:
    """
    Validate the config block that opens every sheet and read its values.

    Args:
        header (Node): The `header` node, the first child of the root.

    Returns:
        Document: title, author and date with no sections yet.

    Raises:
        ValidationError: If the block is not labelled `config`, or a key is unknown, repeated or missing.
    """
    if header.kind != "header":
        raise InternalError(f"Expected a header, got rule {header.kind}", header.span)

    (label,), lines = extract_with_excess(header, 1, "header args")
    (name,) = extract(label, 1, "header label args")
    if name.text != CONFIG_KEY_NAME:
        raise ValidationError(f"Expected '{CONFIG_KEY_NAME}', got '{name.text}' instead.", name.span)

    values: Dict[str, str] = {}
    for line in lines:
        if line.kind != "header_line":
            raise InternalError(f"Expected a header line, got rule {line.kind}", line.span)
        key, value = extract(line, 2, "header_line args")
        if key.text not in CONFIG_KEYS:
            raise ValidationError(f"Invalid configuration key '{key.text}'", key.span)
        if key.text in values:
            raise ValidationError(f"Configuration value for '{key.text}' has already been provided", key.span)
        values[key.text] = value.text.strip()

    for key in CONFIG_KEYS:
        if key not in values:
            raise ValidationError(f"Missing configuration value for '{key}'", header.span)

    return Document(title=values["title"], author=values["author"], date=values["date"])
