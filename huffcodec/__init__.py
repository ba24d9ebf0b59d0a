"""
HuffCodec: A Python library for byte-oriented Huffman compression and decompression.
"""

from .codecs import (
    Container,
    ContainerFile,
    HuffmanCodec,
    HuffmanCodecFile,
    encode,
    decode,
)

from .coders import (
    CoderBase,
    BitOutputStream,
    BitInputStream,
    TextBitCoder,
    PackedBitCoder,
    get_coder,
)

from .models import (
    FrequencyTable,
    HuffmanNode,
    CodeTable,
)

from .trees import (
    build_tree,
    derive_codes,
    leaf_count,
    tree_depth,
)

from .file_handler import (
    read_bytes,
    write_bytes,
    files_equal,
)

from .experiments import HuffmanExperiment

from .settings import TEXT_CODER_CODE, PACKED_CODER_CODE

from .logger import (
    Logger,
    Log,
    LogLevel,
    CodingLog,
    ContainerLog,
    SymbolCodeLog,
    TreeConstructionLog,
    CodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "Container",
    "ContainerFile",
    "HuffmanCodec",
    "HuffmanCodecFile",
    "encode",
    "decode",

    "CoderBase",
    "BitOutputStream",
    "BitInputStream",
    "TextBitCoder",
    "PackedBitCoder",
    "get_coder",

    "FrequencyTable",
    "HuffmanNode",
    "CodeTable",

    "build_tree",
    "derive_codes",
    "leaf_count",
    "tree_depth",

    "read_bytes",
    "write_bytes",
    "files_equal",

    "HuffmanExperiment",

    "TEXT_CODER_CODE",
    "PACKED_CODER_CODE",

    "Logger",
    "Log",
    "LogLevel",
    "CodingLog",
    "ContainerLog",
    "SymbolCodeLog",
    "TreeConstructionLog",
    "CodingProgressStep",

    "FormatError",
    "MissingCodeError",
    "validate_type",
    "validate_file_exists",
]
