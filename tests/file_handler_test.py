import os
import tempfile
import unittest
from huffcodec.file_handler import read_bytes, write_bytes, files_equal

class TestFileHandler(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.first = os.path.join(self.temp_dir.name, "first.bin")
        self.second = os.path.join(self.temp_dir.name, "second.bin")

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_write_read(self):
        write_bytes(self.first, b"\x00\x01data")
        self.assertEqual(read_bytes(self.first), b"\x00\x01data")

    def test_write_requires_bytes(self):
        with self.assertRaises(ValueError):
            write_bytes(self.first, "text")

    def test_equal_files(self):
        write_bytes(self.first, b"same content" * 100)
        write_bytes(self.second, b"same content" * 100)
        self.assertTrue(files_equal(self.first, self.second))
        self.assertTrue(files_equal(self.first, self.second, chunk_size=7))

    def test_different_files(self):
        write_bytes(self.first, b"same content")
        write_bytes(self.second, b"same contenT")
        self.assertFalse(files_equal(self.first, self.second, chunk_size=4))

    def test_prefix_is_not_equal(self):
        write_bytes(self.first, b"abc")
        write_bytes(self.second, b"abcd")
        self.assertFalse(files_equal(self.first, self.second))
        self.assertFalse(files_equal(self.second, self.first))

    def test_empty_files(self):
        write_bytes(self.first, b"")
        write_bytes(self.second, b"")
        self.assertTrue(files_equal(self.first, self.second))

    def test_missing_file(self):
        write_bytes(self.first, b"abc")
        with self.assertRaises(ValueError):
            files_equal(self.first, os.path.join(self.temp_dir.name, "missing.bin"))

    def test_invalid_chunk_size(self):
        write_bytes(self.first, b"abc")
        with self.assertRaises(ValueError):
            files_equal(self.first, self.first, chunk_size=0)

if __name__ == '__main__':
    unittest.main()
