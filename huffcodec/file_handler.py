#file_handler.py

from .settings import COMPARE_CHUNK_SIZE
from .validators import validate_type, validate_file_exists


def read_bytes(file_path: str) -> bytes:
    with open(file_path, 'rb') as file:
        return file.read()


def write_bytes(file_path: str, data: bytes) -> None:
    validate_type(data, "Data", bytes)
    with open(file_path, 'wb') as file:
        file.write(data)


def files_equal(first_path: str, second_path: str, chunk_size: int = COMPARE_CHUNK_SIZE) -> bool:
    """
    Compare two files byte for byte.

    Args:
        first_path (str): Path to the first file.
        second_path (str): Path to the second file.
        chunk_size (int): Number of bytes read from each file at a time.

    Returns:
        bool: True if both files hold the same bytes.
    """
    validate_type(first_path, "First path", str)
    validate_type(second_path, "Second path", str)
    validate_file_exists(first_path)
    validate_file_exists(second_path)
    if chunk_size <= 0:
        raise ValueError("Chunk size must be positive")

    with open(first_path, 'rb') as first, open(second_path, 'rb') as second:
        while True:
            first_chunk = first.read(chunk_size)
            second_chunk = second.read(chunk_size)
            if first_chunk != second_chunk:
                return False
            if not first_chunk:
                return True
