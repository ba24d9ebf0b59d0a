import os
import tempfile
import unittest
from huffcodec.experiments import HuffmanExperiment
from huffcodec.logger import Logger, ContainerLog
from huffcodec.settings import PACKED_CODER_CODE

class TestHuffmanExperiment(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.input_file = os.path.join(self.temp_dir.name, "input.txt")
        with open(self.input_file, "wb") as f:
            f.write(b"Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 20)
        self.root = os.path.join(self.temp_dir.name, "experiments")

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_text_run(self):
        logger = Logger()
        results = HuffmanExperiment("text", self.input_file, self.root, logger=logger).run()
        self.assertTrue(results["integrity_preserved"])
        self.assertEqual(results["input_file_size"], results["decompressed_file_size"])
        self.assertTrue(os.path.exists(os.path.join(self.root, "text", "input.txt.huff")))
        self.assertEqual(len(logger.get_logs(ContainerLog)), 1)

    def test_packed_run_compresses(self):
        results = HuffmanExperiment("packed", self.input_file, self.root, PACKED_CODER_CODE).run()
        self.assertTrue(results["integrity_preserved"])
        self.assertGreater(results["compression_ratio"], 1.0)
        self.assertGreaterEqual(results["compression_time"], 0.0)

    def test_missing_input(self):
        with self.assertRaises(FileNotFoundError):
            HuffmanExperiment("missing", os.path.join(self.temp_dir.name, "nope"), self.root)

if __name__ == '__main__':
    unittest.main()
