"""Command-line entry point: ``poolseed > random_seed.h``.

Writes the generated header to stdout (or ``--output``). Any failure prints
one diagnostic line to stderr and exits with status 1. Output written before
the failure is left in place; the build must check the exit status.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from poolseed import __version__
from poolseed.config import load_config, resolve_config
from poolseed.entropy import EntropySourceRegistry
from poolseed.exceptions import PoolSeedError
from poolseed.generator import HeaderGenerator

logger = logging.getLogger("poolseed")

EXIT_OK = 0
EXIT_FAILURE = 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poolseed",
        description="Generate compile-time random seed constants for the kernel random pools.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  %(prog)s > random_seed.h              # Pools block from /dev/urandom
  %(prog)s --random-gcm -o seed.h       # Also emit GCM constants and counter
  %(prog)s --source system              # Use os.urandom() instead of the device

Every option can also be set through POOLSEED_* environment variables.
""",
    )
    parser.add_argument(
        "--random-gcm",
        action="store_true",
        default=None,
        help="Also emit the GCM hash constants block and counter view.",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Entropy source name (default: device). See --list-sources.",
    )
    parser.add_argument(
        "--device",
        type=str,
        default=None,
        help="Random device path for the 'device' source (default: /dev/urandom).",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Give up after this many replacement reads for one word (default: 0, no limit).",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Write the header to this file instead of stdout.",
    )
    parser.add_argument(
        "--log-level",
        choices=("none", "summary", "full"),
        default=None,
        help="Per-block diagnostic detail (default: summary).",
    )
    parser.add_argument(
        "--list-sources",
        action="store_true",
        help="List registered entropy sources and exit.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show per-block diagnostics on stderr.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "random_gcm": args.random_gcm,
        "entropy_source_type": args.source,
        "entropy_device": args.device,
        "max_replacement_attempts": args.max_attempts,
        "log_level": args.log_level,
    }


def _fail(message: str) -> int:
    print(f"poolseed: {message}, cannot continue", file=sys.stderr)
    return EXIT_FAILURE


def main(argv: list[str] | None = None) -> int:
    """Run the generator. Returns the process exit status."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.list_sources:
        for name in EntropySourceRegistry.list_available():
            print(name)
        return EXIT_OK

    try:
        config = resolve_config(load_config(), _overrides(args))
        source = EntropySourceRegistry.build(config)
    except KeyError as exc:
        return _fail(str(exc.args[0]))
    except PoolSeedError as exc:
        return _fail(str(exc))

    generator = HeaderGenerator(config, source)
    try:
        if args.output:
            with open(args.output, "w", encoding="utf-8") as fh:
                generator.write(fh)
        else:
            generator.write(sys.stdout)
            sys.stdout.flush()
    except PoolSeedError as exc:
        return _fail(str(exc))
    except OSError as exc:
        return _fail(f"cannot write {args.output or 'stdout'}: {exc.strerror or exc}")
    finally:
        source.close()

    if config.diagnostic_mode:
        logger.info("generation summary: %s", generator.generation_logger.get_summary_stats())
    return EXIT_OK


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())
