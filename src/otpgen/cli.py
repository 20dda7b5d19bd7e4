"""Command-line interface for otpgen."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from otpgen.digest import Algorithm
from otpgen.hotp import HOTP
from otpgen.totp import TOTP, Options

log = logging.getLogger(__name__)


def _secret_from_args(args: argparse.Namespace) -> bytes:
    """Return the raw secret, hex-decoding it when --hex is given."""
    if args.hex:
        try:
            return bytes.fromhex(args.secret)
        except ValueError as e:
            raise ValueError(f"Secret is not valid hex: {e}") from e
    return args.secret.encode("utf-8")


def hotp_command(args: argparse.Namespace) -> int:
    """Handle the hotp command."""
    try:
        hotp = HOTP(digits=args.digits)
        print(hotp.generate_code(_secret_from_args(args), args.counter))
        return 0
    except ValueError as e:
        print(f"✗ Failed to generate code: {e}", file=sys.stderr)
        return 1


def totp_command(args: argparse.Namespace) -> int:
    """Handle the totp command."""
    try:
        options = Options(
            digits=args.digits,
            algorithm=args.algorithm,
            time_step=args.time_step,
        )
        totp = TOTP(options)
        print(totp.generate_code(_secret_from_args(args), args.timestamp))
        return 0
    except ValueError as e:
        print(f"✗ Failed to generate code: {e}", file=sys.stderr)
        return 1


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "secret",
        help="Shared secret, as UTF-8 text (or hex with --hex)",
    )
    parser.add_argument(
        "--hex",
        action="store_true",
        help="Interpret the secret as hex-encoded bytes",
    )
    parser.add_argument(
        "--digits",
        "-d",
        type=int,
        default=6,
        help="Number of digits in the code, 6 to 8 (default: 6)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="otpgen",
        description="HOTP/TOTP one-time passcode generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # HOTP command
    hotp_parser = subparsers.add_parser(
        "hotp",
        help="Generate a counter-based code (RFC 4226)",
    )
    _add_common_arguments(hotp_parser)
    hotp_parser.add_argument(
        "--counter",
        "-c",
        type=int,
        default=0,
        help="Moving counter value (default: 0)",
    )

    # TOTP command
    totp_parser = subparsers.add_parser(
        "totp",
        help="Generate a time-based code (RFC 6238)",
    )
    _add_common_arguments(totp_parser)
    totp_parser.add_argument(
        "--timestamp",
        "-t",
        type=int,
        default=None,
        help="Unix timestamp in seconds (default: now)",
    )
    totp_parser.add_argument(
        "--algorithm",
        "-a",
        default=Algorithm.SHA1,
        type=Algorithm.from_name,
        metavar="{SHA1,SHA256}",
        help="HMAC algorithm, e.g. sha1 or SHA-256 (default: SHA1)",
    )
    totp_parser.add_argument(
        "--time-step",
        "-s",
        type=int,
        default=30,
        help="Time step in seconds (default: 30)",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    log.debug("running %s command", args.command)
    if args.command == "hotp":
        return hotp_command(args)
    elif args.command == "totp":
        return totp_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
