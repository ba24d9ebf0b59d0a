"""
settings.py

Configuration constants shared across huffcodec.
"""

ALPHABET_SIZE = 256

# Text container: one '0'/'1' character per bit.
TEXT_OPEN_MARKER = b"<huff>\n"
TEXT_CLOSE_MARKER = b"</huff>\n"

# Packed container: bits packed MSB-first, zero padded to a byte boundary.
PACKED_OPEN_MARKER = b"<huff-packed>\n"
PACKED_CLOSE_MARKER = b"</huff-packed>\n"

TEXT_CODER_CODE = 1
PACKED_CODER_CODE = 2

DEFAULT_ENCODED_FILE_NAME = "encoded.txt"
DEFAULT_DECODED_FILE_NAME = "decoded.txt"
DEFAULT_EXPERIMENT_ROOT = "experiments_output"

COMPARE_CHUNK_SIZE = 64 * 1024

CODING_STEP_INTERVAL_COUNT = 10000
