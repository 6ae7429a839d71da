"""
Command-line entry point.
Parses flags, builds the run configuration and dispatches to a command.
"""

import argparse
import os
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from . import __version__
from .commands import InfoCommand, MarketCommand, ExchangeRateCommand
from .config import (
    DEFAULT_COIN,
    DEFAULT_COINS,
    DEFAULT_CURRENCY,
    LOG_LEVEL_ENV,
    RENDER_WIDTH,
    RunConfig,
    SpinnerConfig,
)
from .errors import CoindlError, ConfigError
from .logging_setup import setup_logging, get_logger
from .render import MarkdownRenderer
from .utils.validation_utilities import (
    split_list,
    validate_coin_id,
    validate_currency,
    validate_single_currency,
)

logger = get_logger("cli")

COIN_HELP = "cryptocurrency id. Refer to the CoinGecko coins list."
COINS_HELP = "Space separated cryptocurrency ids (ex. bitcoin ethereum)."
CURRENCY_HELP = "The target currency of the market data (ex. usd). One currency only."
RATE_CURRENCY_HELP = "Get BTC value in specified currency/currencies (space separated)."


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigError instead of exiting"""

    def error(self, message):
        raise ConfigError(message)


def _common_flags() -> argparse.ArgumentParser:
    common = ArgumentParser(add_help=False)
    common.add_argument("--showNotifs", dest="show_notifications",
                        action=argparse.BooleanOptionalAction, default=True,
                        help="show a notice when the command finishes")
    common.add_argument("--playNotifs", dest="play_notification_beep",
                        action=argparse.BooleanOptionalAction, default=True,
                        help="ring the terminal bell when the command finishes")
    common.add_argument("--width", type=int, default=RENDER_WIDTH,
                        help="render width in columns")
    common.add_argument("--color", action=argparse.BooleanOptionalAction, default=None,
                        help="force colored output on or off")
    common.add_argument("--log-level", default=os.getenv(LOG_LEVEL_ENV, ""),
                        help="console log level (DEBUG, INFO, WARNING, ...)")
    return common


def build_parser() -> ArgumentParser:
    """Build the argument parser with one sub-command per report"""
    parser = ArgumentParser(prog="coindl", description="Crypto prices in your terminal.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = _common_flags()
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    info = subparsers.add_parser("info", parents=[common], help="details for one coin")
    info.add_argument("-c", "--coin", default=DEFAULT_COIN, help=COIN_HELP)
    info.add_argument("--cr", "--currency", dest="currency", default=DEFAULT_CURRENCY, help=CURRENCY_HELP)
    info.add_argument("--full", action="store_true", help="include the coin description")

    market = subparsers.add_parser("market", parents=[common], help="market table for coins")
    market.add_argument("-c", "--coins", default=DEFAULT_COINS, help=COINS_HELP)
    market.add_argument("--cr", "--currency", dest="currency", default=DEFAULT_CURRENCY, help=CURRENCY_HELP)

    exchange = subparsers.add_parser("exchange", parents=[common], help="BTC exchange rates")
    exchange.add_argument("--cr", "--currency", dest="currency", default="", help=RATE_CURRENCY_HELP)

    return parser


def _log_level(name: str) -> str:
    """Normalise a log level name, empty keeps console logging off"""
    if not name:
        return ""
    level = name.upper()
    try:
        logger.level(level)
    except ValueError as e:
        raise ConfigError(f"Unknown log level: {name}") from e
    return level


def _check(result) -> None:
    is_valid, message = result
    if not is_valid:
        raise ConfigError(message)


def build_command(args: argparse.Namespace):
    """
    Create the command object for parsed arguments.

    Raises:
        ConfigError: If an argument value is invalid
    """
    if args.width <= 0:
        raise ConfigError("--width must be positive")

    run_config = RunConfig(
        show_notifications=args.show_notifications,
        play_notification_beep=args.play_notification_beep,
        render_width=args.width,
        spinner=SpinnerConfig(),
    )
    renderer = MarkdownRenderer(width=args.width, color=args.color)

    if args.command == "info":
        _check(validate_coin_id(args.coin))
        _check(validate_single_currency(args.currency))
        return InfoCommand(
            run_config,
            coin_id=args.coin,
            currency=split_list(args.currency)[0],
            full=args.full,
            renderer=renderer,
        )

    if args.command == "market":
        coin_ids = split_list(args.coins)
        if not coin_ids:
            raise ConfigError("At least one coin is required")
        for coin_id in coin_ids:
            _check(validate_coin_id(coin_id))
        _check(validate_single_currency(args.currency))
        return MarketCommand(
            run_config,
            coin_ids=coin_ids,
            currency=split_list(args.currency)[0],
            renderer=renderer,
        )

    currencies = split_list(args.currency)
    for currency in currencies:
        _check(validate_currency(currency))
    return ExchangeRateCommand(run_config, currencies=currencies, renderer=renderer)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run coin-dl.

    Returns:
        Process exit code: 0 on success, 1 on any error
    """
    # .env from the working directory
    load_dotenv(find_dotenv(usecwd=True))
    setup_logging(level="")

    try:
        args = build_parser().parse_args(argv)
        setup_logging(level=_log_level(args.log_level))
        command = build_command(args)
        command.execute()
    except CoindlError as e:
        logger.debug(f"{type(e).__name__}: {e.message}")
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.opt(exception=e).debug("Unexpected error")
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
