import os
import random
import tempfile
import unittest

from huffcodec.codecs import (
    Container,
    ContainerFile,
    HuffmanCodec,
    HuffmanCodecFile,
    encode,
    decode,
)
from huffcodec.models import FrequencyTable
from huffcodec.logger import Logger, ContainerLog, TreeConstructionLog
from huffcodec.settings import TEXT_CODER_CODE, PACKED_CODER_CODE
from huffcodec.validators import FormatError

class TestEncode(unittest.TestCase):
    def test_known_example(self):
        encoded = encode(b"aab")
        self.assertEqual(encoded, b"<huff>\na 2\nb 1\n</huff>\n110")
        container = Container.deserialize(encoded)
        self.assertEqual(len(container.payload), 3)
        self.assertEqual(sorted(container.payload), sorted(b"110"))

    def test_single_symbol(self):
        encoded = encode(b"AAAA")
        self.assertEqual(encoded, b"<huff>\nA 4\n</huff>\n1111")
        self.assertEqual(decode(encoded), b"AAAA")

    def test_empty(self):
        encoded = encode(b"")
        self.assertEqual(encoded, b"<huff>\n</huff>\n")
        self.assertEqual(decode(encoded), b"")

    def test_frequency_lines_in_ascending_symbol_order(self):
        encoded = encode(b"cba")
        self.assertTrue(encoded.startswith(b"<huff>\na 1\nb 1\nc 1\n</huff>\n"))

    def test_deterministic(self):
        data = b"deterministic output for tied frequencies: abcdefgh"
        self.assertEqual(encode(data), encode(data))

    def test_packed(self):
        encoded = encode(b"aab", PACKED_CODER_CODE)
        self.assertEqual(encoded, b"<huff-packed>\na 2\nb 1\n</huff-packed>\n\xc0")
        self.assertEqual(encode(b"", PACKED_CODER_CODE), b"<huff-packed>\n</huff-packed>\n")

class TestRoundTrip(unittest.TestCase):
    def test_text(self):
        self.assertEqual(decode(encode(b"hello world")), b"hello world")

    def test_all_bytes(self):
        data = bytes(range(256))
        self.assertEqual(decode(encode(data)), data)
        self.assertEqual(decode(encode(data, PACKED_CODER_CODE)), data)

    def test_marker_like_bytes(self):
        data = b"</huff>\n<huff>\n 1\n\n  \n0 1"
        self.assertEqual(decode(encode(data)), data)

    def test_random_buffers(self):
        rng = random.Random(42)
        for size in (1, 2, 3, 10, 1000):
            data = bytes(rng.getrandbits(8) for _ in range(size))
            self.assertEqual(decode(encode(data)), data)
            self.assertEqual(decode(encode(data, PACKED_CODER_CODE)), data)

    def test_skewed_buffer(self):
        data = b"a" * 500 + b"b" * 100 + b"c" * 10 + b"\x00\xff"
        self.assertEqual(decode(encode(data)), data)

    def test_frequency_conservation(self):
        data = b"conservation of frequencies"
        encoded = encode(data)
        self.assertEqual(Container.deserialize(encoded).frequencies.total(), len(decode(encoded)))

class TestMalformedContainers(unittest.TestCase):
    def assert_format_error(self, data, message):
        with self.assertRaises(FormatError) as context:
            decode(data)
        self.assertIn(message, str(context.exception))

    def test_missing_opening_marker(self):
        self.assert_format_error(b"plain text that is long enough", "not an encoded container")

    def test_too_short(self):
        self.assert_format_error(b"<huff>\n", "not an encoded container")

    def test_missing_closing_marker(self):
        self.assert_format_error(b"<huff>\na 2\nb 1\n110", "unterminated frequency section")

    def test_unterminated_line(self):
        self.assert_format_error(b"<huff>\na 2222222222", "unterminated frequency section")

    def test_missing_space(self):
        self.assert_format_error(b"<huff>\nA4\n</huff>\n1111", "invalid frequency line")

    def test_bad_count(self):
        self.assert_format_error(b"<huff>\nA x\n</huff>\n1", "invalid frequency line")
        self.assert_format_error(b"<huff>\nA \n</huff>\n1", "invalid frequency line")

    def test_zero_count(self):
        self.assert_format_error(b"<huff>\nA 0\n</huff>\n", "zero count")

    def test_duplicate_symbol(self):
        self.assert_format_error(b"<huff>\nA 1\nA 1\n</huff>\n1", "duplicate symbol")

    def test_truncated_bitstream(self):
        encoded = encode(b"abcd")
        self.assert_format_error(encoded[:-1], "truncated bitstream")

    def test_invalid_bit(self):
        self.assert_format_error(b"<huff>\na 2\nb 1\n</huff>\n11x", "invalid bit character")

    def test_count_mismatch(self):
        self.assert_format_error(b"<huff>\nA 4\n</huff>\n11", "symbol count mismatch")

    def test_packed_trailing_data(self):
        self.assert_format_error(encode(b"aab", PACKED_CODER_CODE) + b"\x00", "trailing data")

class TestContainer(unittest.TestCase):
    def setUp(self):
        self.container = Container(TEXT_CODER_CODE, FrequencyTable.from_bytes(b"aab"), b"110")

    def test_serialization_deserialization(self):
        serialized = Container.serialize(self.container)
        deserialized = Container.deserialize(serialized)
        self.assertEqual(self.container.coder_code, deserialized.coder_code)
        self.assertEqual(self.container.frequencies, deserialized.frequencies)
        self.assertEqual(self.container.payload, deserialized.payload)

    def test_frequency_lines_in_any_order(self):
        deserialized = Container.deserialize(b"<huff>\nb 1\na 2\n</huff>\n110")
        self.assertEqual(deserialized.frequencies, self.container.frequencies)
        self.assertEqual(HuffmanCodec().decompress(deserialized), b"aab")

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            Container(99, FrequencyTable(), b"")
        with self.assertRaises(ValueError):
            Container(TEXT_CODER_CODE, {}, b"")
        with self.assertRaises(ValueError):
            Container(TEXT_CODER_CODE, FrequencyTable(), "110")

    def test_file_write_read(self):
        with tempfile.NamedTemporaryFile(delete=False) as temp_file:
            temp_file_name = temp_file.name
        try:
            ContainerFile.write_to_file(self.container, temp_file_name)
            read_container = ContainerFile.read_from_file(temp_file_name)
            self.assertEqual(self.container.frequencies, read_container.frequencies)
            self.assertEqual(self.container.payload, read_container.payload)
        finally:
            os.remove(temp_file_name)

class TestHuffmanCodec(unittest.TestCase):
    def test_compress_decompress(self):
        codec = HuffmanCodec()
        data = b"Testing Data"
        container = codec.compress(data)
        self.assertEqual(container.coder_code, TEXT_CODER_CODE)
        self.assertEqual(codec.decompress(container), data)

    def test_invalid_input(self):
        codec = HuffmanCodec()
        with self.assertRaises(ValueError):
            codec.compress("text")
        with self.assertRaises(ValueError):
            codec.decompress(b"<huff>\n</huff>\n")

    def test_logging(self):
        logger = Logger()
        container = HuffmanCodec().compress(b"aab", logger=logger)
        container_logs = logger.get_logs(ContainerLog)
        self.assertEqual(len(container_logs), 1)
        self.assertEqual(container_logs[0].header_size, len(b"<huff>\na 2\nb 1\n</huff>\n"))
        self.assertEqual(container_logs[0].payload_size, 3)
        HuffmanCodec().decompress(container, logger)
        self.assertEqual(len(logger.get_logs(TreeConstructionLog)), 2)

class TestHuffmanCodecFile(unittest.TestCase):
    def setUp(self):
        self.data = b"Testing Data \x00\x01\xff"

    def round_trip(self, coder_code):
        codec = HuffmanCodecFile()
        with tempfile.NamedTemporaryFile(delete=False) as temp_input:
            input_file = temp_input.name
            temp_input.write(self.data)
        compressed_file = input_file + ".compressed"
        decompressed_file = input_file + ".decompressed"
        try:
            codec.compress(input_file, compressed_file, coder_code)
            codec.decompress(compressed_file, decompressed_file)
            with open(decompressed_file, "rb") as f:
                decompressed_data = f.read()
            self.assertEqual(self.data, decompressed_data)
        finally:
            for f in [input_file, compressed_file, decompressed_file]:
                if os.path.exists(f):
                    os.remove(f)

    def test_text_round_trip(self):
        self.round_trip(TEXT_CODER_CODE)

    def test_packed_round_trip(self):
        self.round_trip(PACKED_CODER_CODE)

    def test_missing_input(self):
        with self.assertRaises(ValueError):
            HuffmanCodecFile().compress("/nonexistent/input.bin", "out.txt")

if __name__ == '__main__':
    unittest.main()
