"""Command-line entry point: ``optn <command> [options]``."""
import argparse
import math
import sys
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple

from dotenv import load_dotenv

from optn import __version__
from optn.config.config_manager import ConfigManager
from optn.dates.date_parser import parse_date_arg
from optn.dates.weekday_counter import next_friday
from optn.errors import MalformedDateError, OptnError, UsageError
from optn.logging.calc_logger import CalcLogger
from optn.strategy.strategy_calculator import (
    CoveredCallInput,
    DateRange,
    ShortPutInput,
    StrategyCalculator,
)
from optn.cli.repl import run_repl
from optn.cli.report import render_covered_call, render_short_put

MAIN_USAGE = """Usage: optn [--config PATH] <command> [options]

Commands:
  cc    calculate the returns on a covered call
  sp    calculate the returns on a short put
  repl  take arguments from stdin in a loop, one command per line
  help  print this help message

Use `optn <command> --help` for help on an individual command
"""


class OptnArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting the process."""

    def error(self, message):
        raise UsageError(message)


def _date_type(today: date) -> Callable[[str], date]:
    def parse(arg: str) -> date:
        try:
            return parse_date_arg(arg, today)
        except MalformedDateError as e:
            raise argparse.ArgumentTypeError(str(e))
    return parse


def build_command_parser(command: str, today: date, with_basis: bool) -> OptnArgumentParser:
    """Build the parser for the ``sp`` or ``cc`` command.

    Args:
        command: Command name used in the usage line
        today: Date used for defaults and short date forms
        with_basis: Whether to accept a cost basis (covered calls only)

    Returns:
        Configured parser
    """
    parser = OptnArgumentParser(
        prog=f'optn {command}',
        usage=f'optn {command} [parameters]',
        add_help=False,
    )
    parser.add_argument(
        '--open', '-o',
        type=_date_type(today),
        default=today,
        metavar='DATE',
        help='The date the position was opened (defaults to today)'
    )
    parser.add_argument(
        '--expiry', '-e',
        type=_date_type(today),
        default=next_friday(today),
        metavar='DATE',
        help='The date the position expires (defaults to Friday)'
    )
    parser.add_argument(
        '--strike', '-s',
        type=float,
        default=math.nan,
        metavar='PRICE',
        help='The strike price of the option'
    )
    parser.add_argument(
        '--premium', '-p',
        type=float,
        default=math.nan,
        metavar='PRICE',
        help='The premium from the sale'
    )
    if with_basis:
        parser.add_argument(
            '--basis', '-b',
            type=float,
            default=None,
            metavar='PRICE',
            help='The cost basis (defaults to the strike price)'
        )
    parser.add_argument(
        '--help', '-h',
        action='store_true',
        help='Displays this help text.'
    )
    return parser


def parse_command_args(parser: OptnArgumentParser, argv: List[str]) -> argparse.Namespace:
    """Parse command arguments, treating help and leftovers as usage errors.

    Raises:
        UsageError: If help was requested or arguments were not recognized
    """
    args, extras = parser.parse_known_args(argv)
    if args.help:
        raise UsageError("")
    if extras:
        raise UsageError(f"Unrecognized arguments: {' '.join(extras)}")
    return args


def short_put(args: argparse.Namespace, calculator: StrategyCalculator) -> str:
    result = calculator.evaluate_short_put(ShortPutInput(
        range=DateRange(open=args.open, expiry=args.expiry),
        strike=args.strike,
        premium=args.premium,
    ))
    return render_short_put(result)


def covered_call(args: argparse.Namespace, calculator: StrategyCalculator) -> str:
    result = calculator.evaluate_covered_call(CoveredCallInput(
        range=DateRange(open=args.open, expiry=args.expiry),
        strike=args.strike,
        premium=args.premium,
        basis=args.basis,
    ))
    return render_covered_call(result)


# command -> (accepts a basis, handler)
COMMANDS: Dict[str, Tuple[bool, Callable[[argparse.Namespace, StrategyCalculator], str]]] = {
    'cc': (True, covered_call),
    'sp': (False, short_put),
}


def print_usage():
    print(MAIN_USAGE, file=sys.stderr)


def run_command(argv: List[str], calculator: StrategyCalculator,
                logger: Optional[CalcLogger] = None, today: Optional[date] = None,
                allow_repl: bool = True) -> int:
    """Run one command line.

    Args:
        argv: Command name followed by its arguments
        calculator: Calculator used by the strategy commands
        logger: Optional logger for rejected input
        today: Date used for defaults (defaults to the current date)
        allow_repl: Whether the ``repl`` command may be started

    Returns:
        Process exit status
    """
    if not argv:
        print_usage()
        return 1

    command, rest = argv[0], argv[1:]
    if command == 'repl' and allow_repl:
        return run_repl(
            sys.stdin,
            lambda line_args: run_command(line_args, calculator, logger, today, allow_repl=False),
            logger,
        )

    if command not in COMMANDS:
        print_usage()
        return 1

    with_basis, handler = COMMANDS[command]
    parser = build_command_parser(command, today or date.today(), with_basis)
    try:
        args = parse_command_args(parser, rest)
        report = handler(args, calculator)
    except OptnError as e:
        if logger:
            logger.log_warning("Rejected input", {"command": command, "error": str(e) or type(e).__name__})
        if str(e):
            print(str(e), file=sys.stderr)
        print(f"\nUsage: {command} [parameters]\n", file=sys.stderr)
        print(parser.format_help(), file=sys.stderr)
        return 1

    print(report)
    return 0


def build_parser() -> OptnArgumentParser:
    parser = OptnArgumentParser(prog='optn', add_help=False)
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to a JSON configuration file (or set OPTN_CONFIG)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'optn v{__version__}'
    )
    parser.add_argument('command')
    parser.add_argument('args', nargs=argparse.REMAINDER)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the calculator."""
    load_dotenv()
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        print_usage()
        return 1

    try:
        options = build_parser().parse_args(argv)
    except UsageError:
        print_usage()
        return 1

    try:
        config = ConfigManager().load_default(options.config)
    except (FileNotFoundError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger = CalcLogger(config.logging_config)
    try:
        calculator = StrategyCalculator(config, logger)
        return run_command([options.command] + options.args, calculator, logger)
    finally:
        logger.close()


if __name__ == '__main__':
    raise SystemExit(main())
