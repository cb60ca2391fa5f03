"""Command-line interface for article_extractor."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console

from . import __version__
from .encoding import decode_html
from .exceptions import ExtractionError
from .logging_config import setup_logging
from .models.config import ExtractorConfig
from .orchestrator import ArticleExtractor

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_TEXT = 2


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="article-extractor",
        description="Extract the main article text from an HTML document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Readability first, custom heuristic as fallback
  article-extractor page.html

  # Only the custom word-count heuristic
  article-extractor page.html --method custom

  # Read from stdin and print the full result as JSON
  curl -s https://example.com/post | article-extractor - --json
        """,
    )

    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="HTML file to read, '-' for stdin (default: stdin)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--method",
        "-m",
        choices=["auto", "custom", "readability"],
        default="auto",
        help="Extraction method (default: auto = readability, then custom)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="YAML",
        help="YAML configuration file",
    )
    parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Source URL recorded in the result",
    )
    parser.add_argument(
        "--no-language",
        action="store_true",
        help="Skip language detection from the text",
    )

    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress log output",
    )
    output_group.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file",
    )

    return parser


def load_config(args: argparse.Namespace) -> ExtractorConfig:
    """Build the configuration from an optional YAML file and CLI flags."""
    if args.config:
        config = ExtractorConfig.from_yaml_file(args.config)
    else:
        config = ExtractorConfig()

    updates: dict = {}
    if args.method != "auto":
        updates["strategies"] = [args.method]
    if args.no_language:
        updates["detect_language"] = False
    if args.verbose:
        updates["log_level"] = "DEBUG"
    elif args.quiet:
        updates["log_level"] = "ERROR"
    if args.log_file:
        updates["log_file"] = args.log_file

    if updates:
        config = ExtractorConfig.model_validate({**config.model_dump(), **updates})
    return config


def read_source(file: str) -> bytes:
    """Read raw HTML bytes from a file path or stdin."""
    if file == "-":
        return sys.stdin.buffer.read()
    return Path(file).read_bytes()


def run_extractor(args: argparse.Namespace) -> int:
    """Run the extractor with given arguments."""
    console = Console()
    err_console = Console(stderr=True)

    try:
        config = load_config(args)
    except (ValidationError, OSError) as e:
        err_console.print(f"[red]Configuration error:[/red] {e}")
        return EXIT_ERROR

    setup_logging(config, force=True)

    try:
        raw = read_source(args.file)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] Cannot read {args.file}: {e}")
        return EXIT_ERROR

    extractor = ArticleExtractor(config)
    try:
        result = extractor.process_html(decode_html(raw), url=args.url)
    except ExtractionError as e:
        err_console.print(f"[red]Extraction error:[/red] {e}")
        return EXIT_ERROR

    if args.json:
        console.print_json(data=result.to_dict())
    elif result.text is not None:
        # Plain write keeps :codes: and tabs verbatim
        sys.stdout.write(result.text + "\n")

    if not result.found:
        if not args.quiet:
            err_console.print("[yellow]No article text found[/yellow]")
        return EXIT_NO_TEXT

    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_extractor(args)


if __name__ == "__main__":
    sys.exit(main())
