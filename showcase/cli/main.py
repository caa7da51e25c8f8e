"""
Main CLI module with argument parsing and command execution.

Running without arguments prints every vignette as plain text, which is the
canonical showcase output.
"""
import argparse
import sys
from typing import List, Optional

from showcase._package import PACKAGE_NAME, __version__
from showcase.application.dto import PatternName
from showcase.application.showcase_service import ShowcaseService
from showcase.cli.formatters import format_output
from showcase.config.defaults import LogLevel, OutputFormat
from showcase.config.manager import ConfigurationManager
from showcase.domain.core.exceptions import DomainException
from showcase.helpers.logger import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        description="Prototype, Decorator and Iterator design pattern showcase",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Run every vignette
  %(prog)s --pattern decorator               # Run only the decorator vignette
  %(prog)s --format yaml                     # Structured output
        """,
    )

    parser.add_argument('--pattern', action='append', choices=[p.value for p in PatternName],
                        help='Run only this pattern (repeatable)')
    parser.add_argument('--format', choices=[f.value for f in OutputFormat],
                        help='Output format (default: from configuration, text)')
    parser.add_argument('--log-level', choices=[level.value for level in LogLevel],
                        help='Override the configured logging level')
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the showcase and write its output to stdout. Returns the exit code."""
    args = parse_args(argv)
    # Route errors raised while loading configuration through default logging
    setup_logging()

    try:
        config = ConfigurationManager(args.config).get_config()
        logging_config = config.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": LogLevel(args.log_level)})
        setup_logging(logging_config)

        output_format = args.format or config.output.format.value
        results = ShowcaseService().run(args.pattern)
        output = format_output(results, output_format)
    except DomainException as e:
        logger.error("Showcase failed", error=e.to_dict())
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output.rstrip("\n"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
