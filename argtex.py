#!/usr/bin/env python3
"""
Translate a plain-text logic exercise sheet into a LaTeX document.
"""

import argparse
import logging
import sys
from typing import List, Optional

import jinja2
import yaml

from Render.latex import write_document
from Render.settings import load_render_config
from Semantics.document import parse_document
from Syntax.errors import TranslationError, format_error
from Syntax.parse import parse_notation
from Syntax.tree import format_tree
from Utils.helpers import read_text_file
from Utils.logging_config import setup_logging


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = argparse.ArgumentParser("argtex", description="Translate logic exercise notation into LaTeX.")
    parser.add_argument("input", type=str, help="Input file path, usually a .txt file")
    parser.add_argument(
        "output", type=str, nargs="?", default=None, help="Output file path, usually a .tex file (default: output.tex)"
    )
    parser.add_argument("--config", type=str, default=None, help="YAML file with template_dir, template_name, output.")
    parser.add_argument("--print-tree", action="store_true", help="Print the parse tree and exit.")
    parser.add_argument("--log-dir", type=str, default="logs", help="Directory for error logs.")
    parser.add_argument("--verbose", action="store_true", help="Log parser progress.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    setup_logging("argtex", log_dir=args.log_dir, verbose=args.verbose)

    try:
        source = read_text_file(args.input)
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Failed to read {args.input}: {e}")
        return 1

    try:
        if args.print_tree:
            print(format_tree(parse_notation(source)))
            return 0
        document = parse_document(source)
    except TranslationError as e:
        logging.error(f"{args.input}\n{format_error(e, source)}")
        return 1

    try:
        config = load_render_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logging.error(f"Failed to load config: {e}")
        return 1

    try:
        write_document(document, args.output or config.output, config)
    except (OSError, jinja2.TemplateError) as e:
        logging.error(f"Failed to write LaTeX output: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
