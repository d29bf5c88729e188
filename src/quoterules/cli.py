"""Command line entry point.

Usage:
    quoterules -o syntaxes/strings.yaml
    quoterules --scope-suffix toy --max-markers 2 > strings.yaml

Exit Codes:
    0: Grammar generated
    1: Generation or write failure
    2: Invalid arguments

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from quoterules import __version__
from quoterules.config import GeneratorConfig
from quoterules.constants import DEFAULT_LOCALE, DEFAULT_SCOPE_SUFFIX, MARKER_COUNT
from quoterules.diagnostics import DiagnosticFormatter, OutputFormat, QuoteRulesError
from quoterules.emit import write_grammar
from quoterules.generate import generate_grammar

__all__ = ["main", "parse_args"]

logger = logging.getLogger(__name__)

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def parse_args(args: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="quoterules",
        description="Generate string-literal grammar rules for every quote and marker combination",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Grammar file to write (default: standard output)",
    )
    parser.add_argument(
        "--scope-suffix",
        default=DEFAULT_SCOPE_SUFFIX,
        help=f"Language segment of scope names (default: {DEFAULT_SCOPE_SUFFIX})",
    )
    parser.add_argument(
        "--locale",
        default=DEFAULT_LOCALE,
        help=f"Locale for rule descriptions (default: {DEFAULT_LOCALE})",
    )
    parser.add_argument(
        "--max-markers",
        type=int,
        choices=range(MARKER_COUNT + 1),
        default=MARKER_COUNT,
        help=f"Largest marker combination to generate (default: {MARKER_COUNT})",
    )
    parser.add_argument(
        "--error-format",
        type=OutputFormat,
        choices=list(OutputFormat),
        default=OutputFormat.RUST,
        help="Diagnostic style for errors (default: rust)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or every generated rule (-vv)",
    )
    return parser.parse_args(args)


def _report(error: QuoteRulesError | ValueError, output_format: OutputFormat) -> None:
    diagnostic = getattr(error, "diagnostic", None)
    if diagnostic is not None:
        formatter = DiagnosticFormatter(output_format=output_format, color=sys.stderr.isatty())
        print(formatter.format(diagnostic), file=sys.stderr)
    else:
        print(f"error: {error}", file=sys.stderr)


def main(args: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments (None uses sys.argv)

    Returns:
        Exit code: 0 success, 1 generation or write failure. Invalid
        arguments exit with 2 from argparse.
    """
    parsed = parse_args(args)
    logging.basicConfig(
        level=_LOG_LEVELS[min(parsed.verbose, len(_LOG_LEVELS) - 1)],
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GeneratorConfig(
            scope_suffix=parsed.scope_suffix,
            locale=parsed.locale,
            max_markers=parsed.max_markers,
        )
        text = generate_grammar(config) + "\n"
        if parsed.output is None:
            sys.stdout.write(text)
        else:
            write_grammar(text, parsed.output)
    except (QuoteRulesError, ValueError) as e:
        logger.debug("Generation failed", exc_info=True)
        _report(e, parsed.error_format)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
