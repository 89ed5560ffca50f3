"""
Command line entry point: ``orthoseq-gestimator``.
"""

import argparse
import logging
import sys
from typing import List, Optional

from orthoseq.analysis.gestimator import HIT_ORDERS, gestimator
from orthoseq.config import GEstimatorConfig, load_config
from orthoseq.errors import OrthoseqError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orthoseq-gestimator",
        description="Count synonymous and nonsynonymous differences between "
                    "sequence pairs of a codon alignment.",
    )
    parser.add_argument("file", help="FASTA codon alignment (plain or .gz)")
    parser.add_argument("-o", "--output", dest="file_out", default=None,
                        help="output table (default: <input>.gestimator.tsv)")
    parser.add_argument("-m", "--max-hits", dest="max_hits", type=int, default=None,
                        help="partners compared per query sequence (default: 3)")
    parser.add_argument("--order", dest="hit_order", choices=HIT_ORDERS, default=None,
                        help="partner selection order (default: file)")
    parser.add_argument("--remove-all-gaps", dest="remove_all_gaps",
                        action="store_true", default=None,
                        help="drop codon columns gapped in any sequence")
    parser.add_argument("-v", "--verbose", dest="verbose",
                        action="store_true", default=None,
                        help="report every compared pair")
    parser.add_argument("--config", default=None,
                        help="YAML file with default settings")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else GEstimatorConfig()
        config = config.update(
            file_out=args.file_out,
            max_hits=args.max_hits,
            hit_order=args.hit_order,
            remove_all_gaps=args.remove_all_gaps,
            verbose=args.verbose,
        )
        gestimator(args.file, **config.as_kwargs())
    except (OrthoseqError, ValueError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
