"""Command line interface for inspecting media types.

Examples
--------
.. code-block:: bash

    mediatype parse 'Text/HTML; Charset="UTF-8"'
    mediatype parse --json 'application/json;charset=utf-8'
    mediatype full-type 'text/plain;charset=utf-8'
    mediatype compatible 'image/*' image/png
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config.settings import settings
from .exceptions import MediaTypeParseError
from .media_type import MediaType
from .models import MediaTypeInfo
from .utils.log import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INCOMPATIBLE = 1
EXIT_PARSE_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mediatype", description="Parse and compare media types"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=settings.log_level,
    )
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Print the canonical form")
    parse_cmd.add_argument("media_type")
    parse_cmd.add_argument(
        "--json", action="store_true", help="Print a JSON description"
    )

    full_type_cmd = commands.add_parser(
        "full-type", help="Print the canonical form without parameters"
    )
    full_type_cmd.add_argument("media_type")

    compatible_cmd = commands.add_parser(
        "compatible", help="Check whether two media types are compatible"
    )
    compatible_cmd.add_argument("first")
    compatible_cmd.add_argument("second")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the ``mediatype`` command.

    :param argv: Arguments without the program name; defaults to ``sys.argv[1:]``
    :type argv: Optional[List[str]]
    :return: Exit status (0 ok, 1 incompatible, 2 invalid media type)
    :rtype: int
    """
    args = _build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        if args.command == "parse":
            media_type = MediaType.parse(args.media_type)
            if args.json:
                print(MediaTypeInfo.from_media_type(media_type).model_dump_json())
            else:
                print(media_type)
            return EXIT_OK

        if args.command == "full-type":
            print(MediaType.parse(args.media_type).full_type)
            return EXIT_OK

        first = MediaType.parse(args.first)
        second = MediaType.parse(args.second)
        compatible = first.is_compatible(second)
        logger.debug("%s compatible with %s: %s", first, second, compatible)
        print("true" if compatible else "false")
        return EXIT_OK if compatible else EXIT_INCOMPATIBLE
    except MediaTypeParseError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_PARSE_ERROR


if __name__ == "__main__":
    sys.exit(main())
