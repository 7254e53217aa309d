#!/usr/bin/env python3
"""
ANSI Colors - Render terminal output with ANSI colors as inline-styled HTML

Commands:
- convert: convert a file, stdin or a URL to an HTML fragment (or plain text)
- document: color every <pre> block of an HTML document
- serve: run the conversion web service
"""

import argparse
import logging
import sys
from typing import List, Optional

import requests

from ansi_to_html import AnsiToHtml
from converter_config import ConverterConfig
from document_processor import DocumentProcessor

logger = logging.getLogger(__name__)


def read_input(source: Optional[str]) -> str:
    """Read text from a file path, or stdin for None or '-'"""
    if source in (None, "-"):
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def fetch_text(url: str, timeout: float) -> str:
    """Download raw log text"""
    logger.info(f"Fetching {url}")
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.text


def write_output(content: str, destination: Optional[str]):
    """Write to a file path, or stdout for None or '-'"""
    if destination in (None, "-"):
        sys.stdout.write(content)
        return
    with open(destination, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info(f"Wrote {len(content)} chars to {destination}")


def cmd_convert(args, config: ConverterConfig) -> int:
    """Handle the convert command"""
    aggressive = args.aggressive or config.get("converter.aggressive_styles", False)
    converter = AnsiToHtml(aggressive=aggressive)

    if args.url:
        text = fetch_text(args.url, config.get("fetch.timeout_seconds", 10))
    else:
        text = read_input(args.input)

    output = converter.strip(text) if args.plain else converter.convert(text)
    write_output(output, args.output)
    return 0


def cmd_document(args, config: ConverterConfig) -> int:
    """Handle the document command"""
    processor = DocumentProcessor(
        converter=AnsiToHtml(aggressive=config.get("converter.aggressive_styles", False)),
        container_tag=config.get("document.container_tag", "pre"),
        processed_class=config.get("document.processed_class", "ansi-processed"),
    )
    write_output(processor.process_html(read_input(args.input)), args.output)
    return 0


def cmd_serve(args, config: ConverterConfig) -> int:
    """Handle the serve command"""
    # Imported here so the CLI does not pay for Sanic on every conversion
    from server import run_server  # pylint: disable=import-outside-toplevel

    run_server(config, host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser"""
    parser = argparse.ArgumentParser(description="Convert ANSI colored terminal output to HTML")
    parser.add_argument("--config-dir", type=str, help="Config directory (default: ~/.ansi-colors)")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", help="Convert ANSI text to an HTML fragment")
    convert_parser.add_argument("input", nargs="?", help="Input file (default: stdin)")
    convert_parser.add_argument("--url", type=str, help="Fetch the input text from a URL")
    convert_parser.add_argument("--output", "-o", type=str, help="Output file (default: stdout)")
    convert_parser.add_argument("--plain", action="store_true", help="Strip escape sequences instead")
    convert_parser.add_argument("--aggressive", action="store_true",
                                help="Use !important style rules to override page CSS")
    convert_parser.set_defaults(handler=cmd_convert)

    document_parser = subparsers.add_parser("document", help="Color the <pre> blocks of an HTML document")
    document_parser.add_argument("input", help="HTML file ('-' for stdin)")
    document_parser.add_argument("--output", "-o", type=str, help="Output file (default: stdout)")
    document_parser.set_defaults(handler=cmd_document)

    serve_parser = subparsers.add_parser("serve", help="Run the conversion web service")
    serve_parser.add_argument("--host", type=str, help="Bind address")
    serve_parser.add_argument("--port", type=int, help="Port (default: first free port in range)")
    serve_parser.set_defaults(handler=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    # Logging comes first so config load warnings use the same format
    logging.basicConfig(
        level=getattr(logging, args.log_level or "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    config = ConverterConfig(args.config_dir)

    level = str(args.log_level or config.get("logging.level", "INFO")).upper()
    logging.getLogger().setLevel(getattr(logging, level, logging.INFO))

    try:
        return args.handler(args, config)
    except requests.RequestException as e:
        logger.error(f"Failed to fetch input: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0


if __name__ == "__main__":
    sys.exit(main())
