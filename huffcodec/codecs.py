"""
codecs.py

The container format and the encode/decode pipeline.

"""


from typing import Optional

from .coders import CoderBase, get_coder, get_coders
from .file_handler import read_bytes, write_bytes
from .logger import Logger, ContainerLog
from .models import FrequencyTable
from .settings import TEXT_CODER_CODE
from .trees import build_tree, derive_codes
from .validators import FormatError, validate_type, validate_file_exists


class Container:
    """Represents an encoded buffer: its frequency table and payload."""

    def __init__(self, coder_code: int, frequencies: FrequencyTable, payload: bytes) -> None:
        validate_type(coder_code, "Coder code", int)
        validate_type(frequencies, "Frequencies", FrequencyTable)
        validate_type(payload, "Payload", bytes)
        get_coder(coder_code)

        self.coder_code = coder_code
        self.frequencies = frequencies
        self.payload = payload

    def header(self) -> bytes:
        """
        Build the frequency section, markers included.

        The format:
          - opening marker of the coder
          - for every present symbol, in ascending order:
            the raw symbol byte, a space, the decimal count, a line break
          - closing marker of the coder
        """
        coder = get_coder(self.coder_code)
        header = bytearray(coder.open_marker)
        for symbol, count in self.frequencies.items():
            header.append(symbol)
            header += b" " + str(count).encode("ascii") + b"\n"
        header += coder.close_marker
        return bytes(header)

    @staticmethod
    def serialize(container: 'Container') -> bytes:
        """
        Serialize a Container instance into bytes: the frequency section
        followed by the payload, with no delimiter in between.
        """
        return container.header() + container.payload

    @staticmethod
    def deserialize(serialized: bytes) -> 'Container':
        """
        Deserialize bytes into a Container instance.

        Raises:
            FormatError: If the bytes are not a well-formed container.
        """
        validate_type(serialized, "Serialized data", bytes)
        coder = _detect_coder(serialized)
        close_marker = coder.close_marker

        frequencies = FrequencyTable()
        offset = len(coder.open_marker)
        closed = False
        while offset + len(close_marker) <= len(serialized):
            if serialized.startswith(close_marker, offset):
                offset += len(close_marker)
                closed = True
                break

            symbol = serialized[offset]
            if serialized[offset + 1:offset + 2] != b" ":
                raise FormatError(f"invalid frequency line at offset {offset}: expected a space after the symbol")
            end = serialized.find(b"\n", offset + 2)
            if end == -1:
                break
            digits = serialized[offset + 2:end]
            if not digits.isdigit():
                raise FormatError(f"invalid frequency line at offset {offset}: {digits!r} is not a decimal count")
            count = int(digits)
            if count == 0:
                raise FormatError(f"invalid frequency line at offset {offset}: zero count for symbol {symbol}")
            if frequencies.get(symbol) != 0:
                raise FormatError(f"invalid frequency line at offset {offset}: duplicate symbol {symbol}")
            frequencies.set(symbol, count)
            offset = end + 1

        if not closed:
            raise FormatError("unterminated frequency section")

        return Container(coder.coder_code, frequencies, serialized[offset:])


def _detect_coder(serialized: bytes) -> CoderBase:
    for coder in get_coders():
        if (len(serialized) >= len(coder.open_marker) + len(coder.close_marker)
                and serialized.startswith(coder.open_marker)):
            return coder
    raise FormatError("not an encoded container")


class ContainerFile:
    """Provides methods to write and read a Container instance to/from a file."""

    @staticmethod
    def write_to_file(container: Container, file_path: str) -> None:
        """
        Serialize the container and write it as binary data to the given file.

        Args:
            container (Container): The container to write.
            file_path (str): The path to the output file.
        """
        write_bytes(file_path, Container.serialize(container))

    @staticmethod
    def read_from_file(file_path: str) -> Container:
        """
        Read binary data from the given file and deserialize it into a Container instance.

        Args:
            file_path (str): The path to the encoded file.

        Returns:
            Container: The deserialized container.
        """
        return Container.deserialize(read_bytes(file_path))


class HuffmanCodec:
    def compress(
        self,
        data: bytes,
        coder_code: int = TEXT_CODER_CODE,
        logger: Optional[Logger] = None,
    ) -> Container:
        """
        Compress the input data.

        Args:
            data (bytes): The data to compress.
            coder_code (int): Code identifying the payload coder.
            logger: Logger instance for logging.

        Returns:
            Container: The resulting container.
        """
        validate_type(data, "Data", bytes)
        validate_type(coder_code, "Coder code", int)

        coder = get_coder(coder_code, logger=logger)
        frequencies = FrequencyTable.from_bytes(data)
        root = build_tree(frequencies, logger=logger)
        codes = derive_codes(root, logger=logger)
        payload = coder.encode(data, codes)
        container = Container(coder.coder_code, frequencies, payload)

        if logger is not None:
            logger.log(ContainerLog(container.coder_code, len(container.header()), len(payload)))
        return container

    def decompress(self, container: Container, logger: Optional[Logger] = None) -> bytes:
        """
        Decompress a container.

        The tree is rebuilt from the stored frequencies with the same
        algorithm used when compressing, so the codes match bit for bit.

        Args:
            container (Container): The container.
            logger: Logger instance for logging.

        Returns:
            bytes: The decompressed data.

        Raises:
            FormatError: If the payload does not match the frequency table.
        """
        if not isinstance(container, Container):
            raise ValueError("Input must be a Container instance")

        coder = get_coder(container.coder_code, logger=logger)
        root = build_tree(container.frequencies, logger=logger)
        return coder.decode(container.payload, root, container.frequencies.total())


class HuffmanCodecFile(HuffmanCodec):
    def compress(
        self,
        input_path: str,
        output_path: str,
        coder_code: int = TEXT_CODER_CODE,
        logger: Optional[Logger] = None,
    ) -> None:
        """
        Compress the input file and write the container to an output file.

        Args:
            input_path (str): Path to the input file.
            output_path (str): Path to the output file.
            coder_code (int): Code identifying the payload coder.
            logger: Logger instance for logging.
        """
        validate_type(input_path, "Input path", str)
        validate_type(output_path, "Output path", str)
        validate_file_exists(input_path)

        container = super().compress(read_bytes(input_path), coder_code, logger)
        ContainerFile.write_to_file(container, output_path)

    def decompress(
        self,
        compressed_file_path: str,
        output_file_path: str,
        logger: Optional[Logger] = None,
    ) -> None:
        """
        Decompress the input file and write the decompressed data to an output file.

        Args:
            compressed_file_path (str): Path to the encoded file.
            output_file_path (str): Path to the output file.
            logger: Logger instance for logging.
        """
        validate_type(compressed_file_path, "Compressed file path", str)
        validate_type(output_file_path, "Output file path", str)
        validate_file_exists(compressed_file_path)

        container = ContainerFile.read_from_file(compressed_file_path)
        data = super().decompress(container, logger)
        write_bytes(output_file_path, data)


def encode(data: bytes, coder_code: int = TEXT_CODER_CODE, logger: Optional[Logger] = None) -> bytes:
    """
    Encode a buffer into a serialized container.

    Args:
        data (bytes): The data to encode. May be empty.
        coder_code (int): Code identifying the payload coder.
        logger: Logger instance for logging.

    Returns:
        bytes: The container.
    """
    return Container.serialize(HuffmanCodec().compress(data, coder_code, logger))


def decode(data: bytes, logger: Optional[Logger] = None) -> bytes:
    """
    Decode a serialized container back into the original bytes.

    Raises:
        FormatError: If data is not a well-formed container.
    """
    return HuffmanCodec().decompress(Container.deserialize(data), logger)
