"""
coders.py

Bitstream coders: turn input bytes into a payload using a code table, and
walk a Huffman tree over a payload to get the bytes back.

"""


import abc
from io import BytesIO
from typing import Optional, IO

from .logger import Logger, CodingLog, CodingProgressStep
from .models import CodeTable, HuffmanNode
from .settings import (
    TEXT_OPEN_MARKER,
    TEXT_CLOSE_MARKER,
    PACKED_OPEN_MARKER,
    PACKED_CLOSE_MARKER,
    TEXT_CODER_CODE,
    PACKED_CODER_CODE,
)
from .validators import FormatError, validate_type

_ZERO = ord("0")
_ONE = ord("1")


class CoderBase(abc.ABC):
    """
    Abstract base class for coders.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    @abc.abstractmethod
    def coder_code(self) -> int:
        """Return the unique identification code for the coder."""
        pass

    @property
    @abc.abstractmethod
    def open_marker(self) -> bytes:
        """Return the marker that starts a container of this coder."""
        pass

    @property
    @abc.abstractmethod
    def close_marker(self) -> bytes:
        """Return the marker that ends the frequency section."""
        pass

    @abc.abstractmethod
    def encode(self, data: bytes, codes: CodeTable) -> bytes:
        """
        Encode a buffer into a payload.

        Args:
            data (bytes): The input bytes.
            codes (CodeTable): The code of every symbol present in data.

        Returns:
            bytes: The payload.
        """
        pass

    @abc.abstractmethod
    def decode(self, payload: bytes, root: Optional[HuffmanNode], symbol_count: int) -> bytes:
        """
        Decode a payload by walking the tree.

        Args:
            payload (bytes): The encoded payload.
            root (Optional[HuffmanNode]): The rebuilt Huffman tree.
            symbol_count (int): Number of symbols the payload holds.

        Returns:
            bytes: The decoded data.

        Raises:
            FormatError: If the payload does not decode to exactly symbol_count symbols.
        """
        pass

    def get_coder_code(self) -> int:
        return self.coder_code

    def _code_string(self, data: bytes, codes: CodeTable) -> str:
        return "".join([codes.get_code(byte) for byte in data])

    def _log_coding(self, data: bytes, payload: bytes) -> None:
        if self.logger is not None:
            self.logger.log(CodingLog(len(data) * 8, len(payload) * 8))

    def _log_progress(self, message: str, total_steps: int) -> None:
        if self.logger is not None:
            self.logger.log(CodingProgressStep(message, total_steps))


class BitOutputStream:
    """
    A helper class to write bits to an underlying binary stream.
    """

    def __init__(self, out: IO[bytes]) -> None:
        """
        Initialize with an underlying output stream (e.g., a file opened in binary mode).

        Args:
            out (IO[bytes]): The output stream.
        """
        self.out: IO[bytes] = out
        self.current_byte: int = 0
        self.num_bits_filled: int = 0

    def write(self, bit: int) -> None:
        """
        Write a single bit (0 or 1) to the stream.

        Raises:
            ValueError: If the bit is not 0 or 1.
        """
        if bit not in (0, 1):
            raise ValueError("Bit must be 0 or 1")
        self.current_byte = (self.current_byte << 1) | bit
        self.num_bits_filled += 1
        if self.num_bits_filled == 8:
            self.flush_current_byte()

    def write_code(self, code: str) -> None:
        """Write a code given as a string of '0' and '1'."""
        for char in code:
            self.write(1 if char == "1" else 0)

    def flush_current_byte(self) -> None:
        """
        Write the current byte to the underlying stream and reset the buffer.
        """
        self.out.write(bytes((self.current_byte,)))
        self.current_byte = 0
        self.num_bits_filled = 0

    def finish(self) -> None:
        """
        Flush any remaining bits to the stream by padding with zeros.
        """
        if self.num_bits_filled > 0:
            self.current_byte = self.current_byte << (8 - self.num_bits_filled)
            self.flush_current_byte()
        self.out.flush()

    def close(self) -> None:
        self.finish()
        self.out.close()


class BitInputStream:
    """
    A helper class to read bits from an underlying binary stream.
    """

    def __init__(self, inp: IO[bytes]) -> None:
        self.inp: IO[bytes] = inp
        self.current_byte: int = 0
        self.num_bits_remaining: int = 0

    def read(self) -> int:
        """
        Read a single bit from the stream.

        Returns:
            int: 0 or 1 for a valid bit, or -1 if no more bits are available.
        """
        if self.num_bits_remaining == 0:
            byte = self.inp.read(1)
            if len(byte) == 0:
                return -1
            self.current_byte = byte[0]
            self.num_bits_remaining = 8
        self.num_bits_remaining -= 1
        return (self.current_byte >> self.num_bits_remaining) & 1

    def remaining_bits_are_padding(self) -> bool:
        """
        Check that the rest of the current byte is zero and nothing follows it.
        """
        mask = (1 << self.num_bits_remaining) - 1
        if self.current_byte & mask:
            return False
        return len(self.inp.read(1)) == 0

    def close(self) -> None:
        self.inp.close()


class TextBitCoder(CoderBase):
    """
    Writes every bit as an ASCII '0' or '1' character.
    """

    @property
    def coder_code(self) -> int:
        return TEXT_CODER_CODE

    @property
    def open_marker(self) -> bytes:
        return TEXT_OPEN_MARKER

    @property
    def close_marker(self) -> bytes:
        return TEXT_CLOSE_MARKER

    def encode(self, data: bytes, codes: CodeTable) -> bytes:
        validate_type(data, "Data", bytes)
        payload = self._code_string(data, codes).encode("ascii")
        self._log_coding(data, payload)
        return payload

    def decode(self, payload: bytes, root: Optional[HuffmanNode], symbol_count: int) -> bytes:
        validate_type(payload, "Payload", bytes)
        if root is None:
            if payload:
                raise FormatError("invalid code path: bitstream present without a frequency table")
            return b""

        decoded = bytearray()
        node = root
        for position, bit in enumerate(payload):
            if bit == _ZERO:
                node = node.left
            elif bit == _ONE:
                node = node.right
            else:
                raise FormatError(f"invalid bit character {bytes([bit])!r} at bitstream offset {position}")
            if node is None:
                raise FormatError(f"invalid code path at bitstream offset {position}")
            if node.is_leaf:
                decoded.append(node.symbol)
                node = root
                self._log_progress("Decoding symbols", symbol_count)

        if node is not root:
            raise FormatError("truncated bitstream: ends in the middle of a code")
        if len(decoded) != symbol_count:
            raise FormatError(f"symbol count mismatch: expected {symbol_count}, decoded {len(decoded)}")
        return bytes(decoded)


class PackedBitCoder(CoderBase):
    """
    Packs the bits MSB-first into bytes, zero padded to a byte boundary.

    The number of symbols comes from the frequency table, so the padding is
    never mistaken for data.
    """

    @property
    def coder_code(self) -> int:
        return PACKED_CODER_CODE

    @property
    def open_marker(self) -> bytes:
        return PACKED_OPEN_MARKER

    @property
    def close_marker(self) -> bytes:
        return PACKED_CLOSE_MARKER

    def encode(self, data: bytes, codes: CodeTable) -> bytes:
        validate_type(data, "Data", bytes)
        out_buffer = BytesIO()
        bit_out = BitOutputStream(out_buffer)
        bit_out.write_code(self._code_string(data, codes))
        bit_out.finish()
        payload = out_buffer.getvalue()
        self._log_coding(data, payload)
        return payload

    def decode(self, payload: bytes, root: Optional[HuffmanNode], symbol_count: int) -> bytes:
        validate_type(payload, "Payload", bytes)
        bit_in = BitInputStream(BytesIO(payload))
        decoded = bytearray()
        while len(decoded) < symbol_count:
            node = root
            while not node.is_leaf:
                bit = bit_in.read()
                if bit == -1:
                    raise FormatError("truncated bitstream: ends in the middle of a code")
                node = node.left if bit == 0 else node.right
                if node is None:
                    raise FormatError(f"invalid code path after symbol {len(decoded)}")
            decoded.append(node.symbol)
            self._log_progress("Decoding symbols", symbol_count)

        if not bit_in.remaining_bits_are_padding():
            raise FormatError("trailing data after the last symbol")
        return bytes(decoded)


def get_coder(code: int, logger: Optional[Logger] = None) -> CoderBase:
    """
    Retrieve a coder instance based on the given code.

    Args:
        code (int): The coder code (1 for text bits, 2 for packed bits).
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        CoderBase: An instance of a coder.

    Raises:
        ValueError: If the coder code is unknown.
    """
    if code == TEXT_CODER_CODE:
        return TextBitCoder(logger)
    elif code == PACKED_CODER_CODE:
        return PackedBitCoder(logger)
    else:
        raise ValueError("Unknown coder code: " + str(code))


def get_coders(logger: Optional[Logger] = None) -> list:
    return [TextBitCoder(logger), PackedBitCoder(logger)]
