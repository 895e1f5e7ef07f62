"""Documentation generator for css-extras.

Generates:
    docs/functions.md  - Reference for every documented @function in index.css
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import Config
from .errors import (
    CssDocsError,
    OutputWriteError,
    SourceReadError,
    ValidationFailedError,
)
from .extractors import extract_css_docs
from .generators import generate_markdown
from .models import ExtractionResult
from .validators import compute_coverage, validate_docs

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cssdocs",
        description="Generate a Markdown function reference from a stylesheet.",
    )
    parser.add_argument("--source", help="Stylesheet to read (default: index.css)")
    parser.add_argument(
        "--output", help="Markdown file to write (default: docs/functions.md)"
    )
    parser.add_argument(
        "--source-link",
        help="Link target for function headings (default: ../index.css)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when a @function has no doc comment",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Environment first, then command-line flags on top."""
    config = Config.from_env()
    if args.source:
        config.source = Path(args.source)
    if args.output:
        config.output = Path(args.output)
    if args.source_link:
        config.source_link = args.source_link
    if args.strict is not None:
        config.strict = args.strict
    return config


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Cannot read {path}: {e}") from e


def write_output(path: Path, markdown: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(markdown, encoding="utf-8", newline="\n")
    except OSError as e:
        raise OutputWriteError(f"Cannot write {path}: {e}") from e


def generate(config: Config) -> ExtractionResult:
    """Run one extract, validate, render and write pass."""
    content = read_source(config.source)

    log.info("Parsing CSS functions...")
    result = extract_css_docs(content)
    log.info("✓ Found %d functions", len(result.functions))

    validation = validate_docs(result, strict=config.strict)
    for warning in validation.warnings:
        log.warning("⚠ %s", warning)
    if validation.errors:
        for err in validation.errors:
            log.error("✗ %s", err)
        raise ValidationFailedError(validation.errors)

    log.info("Coverage: %.0f%%", compute_coverage(result) * 100)

    # Rendered in full before anything touches the output file
    log.info("Generating Markdown documentation...")
    markdown = generate_markdown(result.functions, source_link=config.source_link)

    write_output(config.output, markdown)
    log.info("✓ Written to %s", config.output)
    return result


def main(argv: list[str] | None = None) -> int:
    """Generate the function reference."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        generate(load_config(args))
    except CssDocsError as e:
        log.error("Error generating documentation: %s", e)
        return 1

    log.info("Documentation generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
