"""
cli.py : command line front end for huffcodec

Usage:
    huffcodec encode INPUT [-o OUTPUT] [--packed]   #writes encoded.txt by default
    huffcodec decode INPUT [-o OUTPUT]              #writes decoded.txt by default
    huffcodec cmp FIRST SECOND                      #byte-for-byte comparison
    huffcodec experiment INPUT [--root DIR]         #round trip with size and timing report

The short forms -e, -d and -c are accepted in place of encode, decode and cmp.
"""

import argparse
import os
import sys
from typing import List, Optional

from .codecs import encode, decode
from .experiments import HuffmanExperiment
from .file_handler import read_bytes, write_bytes, files_equal
from .logger import Logger
from .settings import (
    TEXT_CODER_CODE,
    PACKED_CODER_CODE,
    DEFAULT_ENCODED_FILE_NAME,
    DEFAULT_DECODED_FILE_NAME,
    DEFAULT_EXPERIMENT_ROOT,
)
from .validators import FormatError

EXIT_OK = 0
EXIT_CANNOT_OPEN = 1
EXIT_CANNOT_WRITE = 2
EXIT_BAD_CONTAINER = 3

_COMMAND_ALIASES = {"-e": "encode", "-d": "decode", "-c": "cmp"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="huffcodec", description="Huffman encode, decode and compare files.")
    parser.add_argument("--verbose", action="store_true", help="print informational logs")
    parser.add_argument("--log-file", help="save the collected logs to this file")
    commands = parser.add_subparsers(dest="command", required=True)

    encode_parser = commands.add_parser("encode", help="encode a file")
    encode_parser.add_argument("input")
    encode_parser.add_argument("-o", "--output", default=DEFAULT_ENCODED_FILE_NAME)
    encode_parser.add_argument("--packed", action="store_true", help="pack the bitstream into bytes")

    decode_parser = commands.add_parser("decode", help="decode a file")
    decode_parser.add_argument("input")
    decode_parser.add_argument("-o", "--output", default=DEFAULT_DECODED_FILE_NAME)

    cmp_parser = commands.add_parser("cmp", help="compare two files byte for byte")
    cmp_parser.add_argument("first")
    cmp_parser.add_argument("second")

    experiment_parser = commands.add_parser("experiment", help="round trip a file and report the compression ratio")
    experiment_parser.add_argument("input")
    experiment_parser.add_argument("--root", default=DEFAULT_EXPERIMENT_ROOT)
    experiment_parser.add_argument("--packed", action="store_true")

    return parser


def _read_input(path: str, logger: Logger) -> Optional[bytes]:
    try:
        return read_bytes(path)
    except OSError:
        logger.error(f"Can not open \"{path}\".")
        return None


def _write_output(path: str, data: bytes, logger: Logger) -> bool:
    try:
        write_bytes(path, data)
    except OSError:
        logger.error("Unable to create out file.")
        return False
    return True


def run_encode(args: argparse.Namespace, logger: Logger) -> int:
    data = _read_input(args.input, logger)
    if data is None:
        return EXIT_CANNOT_OPEN
    coder_code = PACKED_CODER_CODE if args.packed else TEXT_CODER_CODE
    if not _write_output(args.output, encode(data, coder_code, logger), logger):
        return EXIT_CANNOT_WRITE
    return EXIT_OK


def run_decode(args: argparse.Namespace, logger: Logger) -> int:
    data = _read_input(args.input, logger)
    if data is None:
        return EXIT_CANNOT_OPEN
    try:
        decoded = decode(data, logger)
    except FormatError as e:
        logger.error(f"Invalid container \"{args.input}\": {e}")
        return EXIT_BAD_CONTAINER
    if not _write_output(args.output, decoded, logger):
        return EXIT_CANNOT_WRITE
    return EXIT_OK


def run_cmp(args: argparse.Namespace, logger: Logger) -> int:
    for path in (args.first, args.second):
        if not os.path.isfile(path):
            logger.error(f"Can not open \"{path}\".")
            return EXIT_CANNOT_OPEN
    equal = files_equal(args.first, args.second)
    print(f"Files are {'' if equal else 'not '}equal.")
    return EXIT_OK


def run_experiment(args: argparse.Namespace, logger: Logger) -> int:
    if not os.path.isfile(args.input):
        logger.error(f"Can not open \"{args.input}\".")
        return EXIT_CANNOT_OPEN
    coder_code = PACKED_CODER_CODE if args.packed else TEXT_CODER_CODE
    name = os.path.basename(args.input) + ("_packed" if args.packed else "_text")
    results = HuffmanExperiment(name, args.input, args.root, coder_code, logger).run()
    for key, value in results.items():
        print(f"{key}: {value}")
    return EXIT_OK


_HANDLERS = {
    "encode": run_encode,
    "decode": run_decode,
    "cmp": run_cmp,
    "experiment": run_experiment,
}


def _expand_command_alias(argv: List[str]) -> List[str]:
    """Replace a short command form, found after the global options, with its full name."""
    index = 0
    while index < len(argv) and argv[index].startswith("--"):
        if argv[index] == "--log-file":
            index += 1
        index += 1
    if index < len(argv):
        argv = argv[:index] + [_COMMAND_ALIASES.get(argv[index], argv[index])] + argv[index + 1:]
    return argv


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    argv = _expand_command_alias(argv)

    args = build_parser().parse_args(argv)
    logger = Logger()
    logger.display_info = args.verbose

    status = _HANDLERS[args.command](args, logger)

    if args.log_file:
        logger.save(args.log_file)
    return status
