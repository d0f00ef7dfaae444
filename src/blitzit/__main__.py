"""Entry point for blitzit CLI."""

import logging
import sys

from blitzit.cli import build_parser
from blitzit.config import read_config


def main():
    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    level = str(read_config(args.data_dir)["log_level"]).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format="%(levelname)s %(name)s: %(message)s")

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
