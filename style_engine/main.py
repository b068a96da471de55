#!/usr/bin/env python3
"""
Wink Style - command line entry point.

Prints the style tree for an HTML file and one or more CSS files.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

from style_engine import __version__
from style_engine.css import Stylesheet, parse_css
from style_engine.dom import parse_html
from style_engine.style import StyledNode, style_tree
from style_engine.utils.config import Config
from style_engine.utils.logging import log_exception, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Wink Style - print the style tree of a document")

    parser.add_argument("html_file", help="HTML document to style")
    parser.add_argument("css_files", nargs="*", help="Stylesheets, applied in the order given")
    parser.add_argument("--fragment", action="store_true", default=None,
                        help="Parse the HTML as a fragment instead of a full document")
    parser.add_argument("--json", action="store_true", help="Print the style tree as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", help="Path to the configuration file", default=None)
    parser.add_argument("--set", dest="overrides", action="append", default=[], type=config_override,
                        metavar="KEY=VALUE", help="Override a configuration value, e.g. output.indent=4")
    parser.add_argument("--save-config", action="store_true",
                        help="Write the configuration, including --set overrides, back to the config file")
    parser.add_argument("--version", action="version", version=f"Wink Style {__version__}")

    return parser.parse_args(argv)


def styled_node_to_dict(styled: StyledNode) -> Dict[str, Any]:
    """Convert a styled subtree into plain data for JSON output."""
    node = styled.node
    if node.is_element:
        data: Dict[str, Any] = {
            "tag": node.element.tag_name,
            "attributes": dict(node.element.attributes),
        }
    else:
        data = {"text": node.text}

    data["values"] = {name: value.to_css() for name, value in styled.specified_values.items()}
    data["children"] = [styled_node_to_dict(child) for child in styled.children]
    return data


def format_style_tree(styled: StyledNode, indent: int = 2, depth: int = 0) -> List[str]:
    """Render a styled subtree as an indented outline, one line per node."""
    node = styled.node
    if node.is_element:
        label = f"<{node.element.tag_name}>"
    else:
        label = json.dumps(node.text.strip())

    line = " " * (indent * depth) + label
    if styled.specified_values:
        declarations = "; ".join(f"{name}: {value.to_css()}"
                                 for name, value in sorted(styled.specified_values.items()))
        line = f"{line} {{ {declarations} }}"

    lines = [line]
    for child in styled.children:
        lines.extend(format_style_tree(child, indent, depth + 1))
    return lines


def read_file(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def config_override(text: str) -> Tuple[str, Any]:
    """Parse a KEY=VALUE option; VALUE is read as JSON when possible."""
    key, sep, raw = text.partition('=')
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{text}'")
    try:
        value = json.loads(raw)
    except ValueError:
        value = raw
    return key.strip(), value


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = Config(args.config)
    for key, value in args.overrides:
        config.set(key, value)

    console_level = "DEBUG" if args.debug else config.get("logging.console_level", "WARNING")
    setup_logging(log_file=config.get("logging.file"), console_level=console_level)
    logger.debug(f"Effective configuration: {json.dumps(config.get_all(), sort_keys=True)}")

    try:
        if args.save_config:
            config.save()
            logger.info(f"Configuration saved to {config.config_path}")

        fragment = args.fragment if args.fragment is not None else config.get("html.fragment", False)
        output_format = "json" if args.json else config.get("output.format", "text")
        indent = int(config.get("output.indent", 2))

        document = parse_html(read_file(args.html_file), fragment=bool(fragment))
        stylesheet = Stylesheet.concat(parse_css(read_file(path)) for path in args.css_files)
        logger.info(f"Styling {document.count()} nodes with {len(stylesheet)} rules")

        styled = style_tree(document, stylesheet)

        if output_format == "json":
            print(json.dumps(styled_node_to_dict(styled), indent=indent))
        else:
            print("\n".join(format_style_tree(styled, indent)))
    except Exception as e:
        log_exception(logger, e, "Failed to build style tree")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
