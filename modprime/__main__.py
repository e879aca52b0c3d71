"""Command line entry point: generate and test probable primes."""

import argparse
import asyncio
import logging
import sys
import time
from typing import List, Optional

from dotenv import load_dotenv

from .converters import RSAConverter
from .errors import InvalidArgumentError
from .mpc import MPC
from .primes import Primes
from .rsa import RSA
from .utils import EnvironmentManager, EnvironmentVariables, ExecutionCapability

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    default_iterations = EnvironmentManager.get_int(EnvironmentVariables.MILLER_RABIN_ITERATIONS)

    parser = argparse.ArgumentParser(
        prog="modprime",
        description="Generate and test probable primes (Miller-Rabin).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    prime_parser = subparsers.add_parser("prime", help="Generate a random probable prime")
    prime_parser.add_argument("bits", type=int, help="Exact bit length of the prime")

    test_parser = subparsers.add_parser("test", help="Test whether a value is a probable prime")
    test_parser.add_argument("value", type=str, help="Value to test (decimal, or hex with 0x)")

    rsa_parser = subparsers.add_parser("rsa", help="Generate RSA key parameters")
    rsa_parser.add_argument("bits", type=int, help="Bit size of the RSA modulus")

    for sub in (prime_parser, test_parser, rsa_parser):
        sub.add_argument(
            "--iterations",
            type=int,
            default=default_iterations,
            help=f"Miller-Rabin rounds (default: {default_iterations})",
        )
    for sub in (prime_parser, rsa_parser):
        sub.add_argument(
            "--sequential",
            action="store_true",
            help="Search in this process only, without worker processes",
        )

    return parser


def run(args: argparse.Namespace) -> int:
    capability = (
        ExecutionCapability.sequential()
        if getattr(args, "sequential", False)
        else ExecutionCapability.detect()
    )

    if args.command == "prime":
        start_time = time.time()
        prime = asyncio.run(Primes.generate_prime(args.bits, args.iterations, capability))
        total_time = time.time() - start_time
        print(f"Found {args.bits}-bit probable prime in {total_time:.2f} seconds")
        print(f"hex = 0x{MPC.to_hex(prime)}")
        print(f"dec = {prime}")
        return 0

    if args.command == "test":
        try:
            value = MPC.mpz(int(args.value, 0))
        except ValueError:
            raise InvalidArgumentError(f"invalid integer: {args.value!r}")
        is_prime = asyncio.run(Primes.is_probably_prime(value, args.iterations))
        print(f"{args.value} is {'probably prime' if is_prime else 'composite'}")
        return 0 if is_prime else 1

    start_time = time.time()
    rsa = asyncio.run(RSA.generate(args.bits, args.iterations, capability))
    total_time = time.time() - start_time
    print(f"Generated RSA parameters in {total_time:.2f} seconds")
    for name, value in RSAConverter.to_dict(rsa).items():
        print(f"{name} = 0x{value}")
    return 0


def configure_logging() -> None:
    """Configure the root logger from LOG_LEVEL, falling back to the default on unknown names."""
    level = EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper()
    default = EnvironmentVariables.LOG_LEVEL.default_value
    known = level in logging.getLevelNamesMapping()

    logging.basicConfig(
        level=level if known else default,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not known:
        logger.warning(
            "Ignoring unknown %s=%r, using %s", EnvironmentVariables.LOG_LEVEL.env_name, level, default
        )


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()
    try:
        return run(args)
    except InvalidArgumentError as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
