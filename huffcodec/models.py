"""
models.py

The shared objects used in the huffcodec.

"""


from typing import Optional, Iterable, Iterator, List, Dict, Tuple

import numpy as np

from .settings import ALPHABET_SIZE
from .validators import MissingCodeError, validate_symbol, validate_type


class FrequencyTable:
    """
    Occurrence count of every byte value in a buffer.

    The table always has one slot per byte value. Symbols with a zero count
    are treated as absent.
    """
    def __init__(self, counts: Optional[Iterable[int]] = None) -> None:
        if counts is None:
            self.counts: List[int] = [0] * ALPHABET_SIZE
        else:
            self.counts = [int(count) for count in counts]
            if len(self.counts) != ALPHABET_SIZE:
                raise ValueError(f"Frequency table must have {ALPHABET_SIZE} entries")
            if any(count < 0 for count in self.counts):
                raise ValueError("Frequencies must be non-negative")

    @classmethod
    def from_bytes(cls, data: bytes) -> 'FrequencyTable':
        """
        Count the occurrences of each byte value in data.

        Args:
            data (bytes): The buffer to count.

        Returns:
            FrequencyTable: The table of counts.
        """
        validate_type(data, "Data", bytes)
        if len(data) == 0:
            return cls()
        counts = np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=ALPHABET_SIZE)
        return cls(counts.tolist())

    def get(self, symbol: int) -> int:
        validate_symbol(symbol)
        return self.counts[symbol]

    def set(self, symbol: int, frequency: int) -> None:
        validate_symbol(symbol)
        validate_type(frequency, "Frequency", int)
        if frequency < 0:
            raise ValueError("Frequency must be non-negative")
        self.counts[symbol] = frequency

    def present_symbols(self) -> List[int]:
        """
        Get the symbols with a non-zero count, in ascending order.

        Returns:
            List[int]: The present symbols.
        """
        return [symbol for symbol, count in enumerate(self.counts) if count != 0]

    def items(self) -> Iterator[Tuple[int, int]]:
        for symbol in self.present_symbols():
            yield symbol, self.counts[symbol]

    def total(self) -> int:
        return sum(self.counts)

    def get_size(self) -> int:
        """
        Get the number of distinct symbols present.

        Returns:
            int: Number of symbols with a non-zero count.
        """
        return len(self.present_symbols())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return False
        return self.counts == other.counts

    def __repr__(self) -> str:
        entries = ", ".join(f"{symbol}: {count}" for symbol, count in self.items())
        return f"FrequencyTable({{{entries}}})"


class HuffmanNode:
    """
    A node of a Huffman tree.

    Leaves carry a symbol; internal nodes carry the summed frequency of
    their children. The order attribute is the insertion sequence number
    used to break frequency ties.
    """
    __slots__ = ("symbol", "frequency", "left", "right", "order")

    def __init__(
        self,
        frequency: int,
        symbol: Optional[int] = None,
        left: Optional['HuffmanNode'] = None,
        right: Optional['HuffmanNode'] = None,
        order: int = 0,
    ) -> None:
        self.symbol = symbol
        self.frequency = frequency
        self.left = left
        self.right = right
        self.order = order

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __lt__(self, other: 'HuffmanNode') -> bool:
        return (self.frequency, self.order) < (other.frequency, other.order)

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"HuffmanNode(symbol={self.symbol}, frequency={self.frequency})"
        return f"HuffmanNode(frequency={self.frequency})"


class CodeTable:
    """
    Maps each present symbol to its code, a string of '0' and '1'.
    """
    def __init__(self, codes: Optional[Dict[int, str]] = None) -> None:
        self.codes: Dict[int, str] = dict(codes) if codes else {}

    def add(self, symbol: int, code: str) -> None:
        validate_symbol(symbol)
        if not code:
            raise ValueError("Code must not be empty")
        self.codes[symbol] = code

    def get_code(self, symbol: int) -> str:
        """
        Get the code assigned to symbol.

        Raises:
            MissingCodeError: If the symbol has no code.
        """
        try:
            return self.codes[symbol]
        except KeyError:
            raise MissingCodeError(f"No code for symbol {symbol}") from None

    def is_prefix_free(self) -> bool:
        """
        Check that no code is a prefix of another code.

        Sorted codes place any prefix directly before a code it prefixes,
        so checking neighbours is enough.
        """
        ordered = sorted(self.codes.values())
        for shorter, longer in zip(ordered, ordered[1:]):
            if longer.startswith(shorter):
                return False
        return True

    def items(self):
        return self.codes.items()

    def __len__(self) -> int:
        return len(self.codes)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.codes

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CodeTable):
            return self.codes == other.codes
        if isinstance(other, dict):
            return self.codes == other
        return False

    def __repr__(self) -> str:
        return f"CodeTable({self.codes})"
