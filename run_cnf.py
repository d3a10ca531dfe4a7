#!/usr/bin/env python3
# run_cnf.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Command-line interface for the CNF derivation with configurable logging levels

import sys
import json
import argparse
from pathlib import Path

from core import derive, Derivation
from syntax import parse
from syntax.exceptions import ParseError
from utils.logger import configure_logging, get_logger


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def print_derivation(derivation: Derivation) -> None:
    """Print every stage of a derivation as plain text.

    Args:
        derivation: Completed derivation
    """
    logger = get_logger()

    logger.info(f"Fórmula original: {derivation.source}")

    for index, stage in enumerate(derivation.stages, start=1):
        logger.stage_header(index, stage.title)
        for message in stage.messages():
            logger.stage_step(message)
        logger.stage_result(str(stage.formula))


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Clausal first-order CNF derivation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=r"""
Examples:
  python run_cnf.py -f "\forall x \exists y P(x,y)"
  python run_cnf.py -i formula.tex -v
  python run_cnf.py -i formula.tex --json
  python run_cnf.py -f "p \land" --validate-only

Formula notation:
  \neg \lnot  \land \wedge  \lor \vee  \rightarrow \to  \leftrightarrow \iff
  \forall x ...  \exists x ...  P(x,f(y))  ( )
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--formula", help="Formula text")
    source.add_argument(
        "-i", "--input", type=Path, help="Path to a file holding the formula"
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also print a one-line summary of the final CNF and Horn verdict",
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--json", action="store_true", help="Print the derivation as JSON"
    )

    parser.add_argument(
        "--validate-only", action="store_true", help="Only check the formula syntax"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the CNF derivation application.

    Args:
        argv: Command line arguments, defaults to sys.argv

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # The derivation report is logged at INFO, so plain runs stay at INFO and
    # --verbose only adds the summary line
    configure_logging(verbose=True, debug=args.debug)
    logger = get_logger()

    try:
        text = args.formula if args.formula is not None else read_formula_file(args.input)

        if args.validate_only:
            parse(text)
            logger.info("✅ Formula syntax is well-formed")
            return 0

        derivation = derive(text)

        if args.json:
            print(json.dumps(derivation.to_dict(), ensure_ascii=False, indent=2))
        elif derivation.ok:
            print_derivation(derivation)

        if not derivation.ok:
            raise derivation.error

        if args.verbose and not args.json:
            verdict = "Horn" if derivation.horn.is_horn else "not Horn"
            logger.info(f"\n>>> RESULT: {derivation.final} ({verdict}) <<<")

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Derivation interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
