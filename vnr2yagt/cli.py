#!/usr/bin/env python3
"""
vnr2yagt - convert a VNR shared dictionary to Yagt format

Reads the XML dictionary exported by Visual Novel Reader (usually named
gamedic.xml) and writes the JSON shared dictionary Yagt loads.

Example:
    vnr2yagt -s gamedic.xml
    vnr2yagt --source=gamedic.xml --output=shareddict.json
    vnr2yagt -s gamedic.xml -c vnr2yagt.yaml

The process exits with status 0 on every path, errors included; failures
are reported as ``ERROR: <message>`` on stderr.
"""

import argparse
import sys
from typing import Optional, Sequence

from . import __version__
from .config import ConverterConfig, DEFAULT_OUTPUT_PATH, load_config
from .converter import ConversionError, DictionaryConverter
from .format_handlers import VnrXmlHandler, YagtJsonHandler


class UsageError(Exception):
    """Bad command line; help is shown along with the message."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="vnr2yagt",
        description=f"Shared Dict VNR to Yagt v{__version__}\nConvert VNR shared dict to Yagt format",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true",
                        help="print this help page and exit")
    parser.add_argument("-s", "--source", metavar="SOURCE_PATH",
                        help="source file path (often named gamedic.xml)")
    parser.add_argument("-o", "--output", metavar="OUTPUT_PATH",
                        help=f"output file path (default {DEFAULT_OUTPUT_PATH})")
    parser.add_argument("-c", "--config", metavar="CONFIG_PATH",
                        help="YAML file overriding filter settings and default output")
    return parser


def check_options(args: argparse.Namespace, config: ConverterConfig) -> None:
    """
    Validate parsed options and fill in the output default.

    Raises:
        UsageError: on a missing or misnamed path
    """
    if not args.source:
        raise UsageError("need to specify source file path")
    if not VnrXmlHandler().accepts(args.source):
        raise UsageError("source file needs to be a XML file")
    if not args.output:
        args.output = config.output
    if not YagtJsonHandler().accepts(args.output):
        raise UsageError("output file needs to be a JSON file")


def _load_config(path: Optional[str]) -> ConverterConfig:
    if not path:
        return ConverterConfig()
    if not path.endswith((".yaml", ".yml")):
        raise UsageError("config file needs to be a YAML file")
    try:
        return load_config(path)
    except (OSError, UnicodeDecodeError) as e:
        raise ConversionError(f"file {path} load failed") from e


def print_error(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv:
        parser.print_help()
        return 0

    try:
        args = parser.parse_args(argv)
        if args.help:
            parser.print_help()
            return 0
        config = _load_config(args.config)
        check_options(args, config)
    except UsageError as e:
        print_error(str(e))
        parser.print_help()
        return 0
    except (ConversionError, ValueError) as e:
        print_error(str(e))
        return 0

    converter = DictionaryConverter(args.source, args.output, config)
    try:
        converter.load()
        print(f"loaded file {converter.source_path}")
        converter.convert()
        converter.save()
        print(f"saved to {converter.output_path}")
    except (ConversionError, ValueError) as e:
        print_error(str(e))

    return 0


if __name__ == "__main__":
    sys.exit(main())
