#experiments.py
import os
import time
from typing import Optional

from .codecs import HuffmanCodecFile
from .file_handler import files_equal
from .logger import Logger
from .settings import TEXT_CODER_CODE


class HuffmanExperiment:
    def __init__(self, name: str, input_file_path: str, experiment_root_folder_path: str,
                 coder_code: int = TEXT_CODER_CODE, logger: Optional[Logger] = None):

        self.name = name

        if not os.path.exists(input_file_path):
            raise FileNotFoundError(f"File {input_file_path} not found.")
        if not os.access(input_file_path, os.R_OK):
            raise PermissionError(f"File {input_file_path} is not readable.")

        self.input_file_path = input_file_path

        self.experiment_folder_path = os.path.join(experiment_root_folder_path, name)
        if not os.path.exists(self.experiment_folder_path):
            os.makedirs(self.experiment_folder_path)

        input_file_name = os.path.basename(input_file_path)
        self.compressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}.huff")
        self.decompressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}_decompressed")

        self.logger = logger if logger is not None else Logger()
        self.codec = HuffmanCodecFile()
        self.coder_code = coder_code

    def run(self) -> dict:
        self.input_file_size = os.path.getsize(self.input_file_path)

        self.compression_start_time = time.time()
        self.codec.compress(self.input_file_path, self.compressed_file_path, self.coder_code, self.logger)
        self.compression_end_time = time.time()

        self.decompression_start_time = time.time()
        self.codec.decompress(self.compressed_file_path, self.decompressed_file_path, self.logger)
        self.decompression_end_time = time.time()

        self.compressed_file_size = os.path.getsize(self.compressed_file_path)
        self.decompressed_file_size = os.path.getsize(self.decompressed_file_path)

        # the container is never empty: it always holds both markers
        self.compression_ratio = self.input_file_size / self.compressed_file_size
        self.integrity_preserved = files_equal(self.input_file_path, self.decompressed_file_path)

        return self.results()

    def results(self) -> dict:
        return {
            "name": self.name,
            "input_file_size": self.input_file_size,
            "compressed_file_size": self.compressed_file_size,
            "decompressed_file_size": self.decompressed_file_size,
            "compression_ratio": self.compression_ratio,
            "compression_time": self.compression_end_time - self.compression_start_time,
            "decompression_time": self.decompression_end_time - self.decompression_start_time,
            "integrity_preserved": self.integrity_preserved,
        }
