"""CLI: восстановление секрета из файла долей.

    share-recover [PATH] [--use-all | --points X,X,...] [--format json|text] [-v]

Результат печатается в stdout. При ошибке восстановления печатается
"Error: <сообщение>" в stderr и возвращается код 1.
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from src.core.errors import ShareRecoveryError

from .config import DEFAULT_INPUT_PATH, ReconstructionConfig
from .loader import load_share_set
from .reconstructor import SecretReconstructor

logger = logging.getLogger(__name__)


def parse_points(value: str) -> tuple[int, ...]:
    """Разбор списка x через запятую ("1,3,6")."""
    try:
        return tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid x list: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="share-recover",
        description="Reconstruct a polynomial and its secret f(0) from threshold shares.",
    )
    p.add_argument(
        "path",
        nargs="?",
        default=str(DEFAULT_INPUT_PATH),
        help=f"JSON share file (default: {DEFAULT_INPUT_PATH})",
    )
    subset = p.add_mutually_exclusive_group()
    subset.add_argument(
        "--use-all",
        action="store_true",
        help="Interpolate through all shares instead of the first k.",
    )
    subset.add_argument(
        "--points",
        type=parse_points,
        default=None,
        help="Comma-separated x values to interpolate through (exactly k).",
    )
    p.add_argument("--format", choices=("json", "text"), default="json", help="Output format.")
    p.add_argument(
        "--no-contracts",
        action="store_true",
        help="Skip JSON Schema validation of input and result.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = ReconstructionConfig(
            use_all_points=args.use_all,
            subset_xs=args.points,
            validate_contracts=not args.no_contracts,
        )
        share_set = load_share_set(args.path, validate_contract=config.validate_contracts)
        result = SecretReconstructor(config).reconstruct(share_set)
    except (ShareRecoveryError, OSError) as e:
        logger.debug("Reconstruction failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == "text":
        print(result.to_text())
    else:
        print(json.dumps(result.to_output_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
