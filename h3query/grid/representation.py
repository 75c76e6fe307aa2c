"""
Cell representations for the H3 query facade.

A cell is one value with two encodings: the 64-bit integer identifier and the
lowercase hexadecimal address string. h3 ships an API module for each
encoding with identical function names, so a codec is little more than the
pairing of an encoding with its API module plus the conversions between the
two encodings.
"""

import re
from dataclasses import dataclass
from enum import Enum
from types import ModuleType
from typing import Any, Dict, Optional

from h3.api import basic_int, basic_str

_MAX_INDEX = 2**64

# Canonical address text: up to 16 hex digits, no prefix, sign or padding
_ADDRESS_PATTERN = re.compile(r"[0-9a-fA-F]{1,16}")


class CellRepresentation(Enum):
    """Supported cell encodings."""

    IDENTIFIER = "identifier"
    ADDRESS = "address"


@dataclass(frozen=True)
class CellCodec:
    """Binds a cell encoding to the h3 API module that speaks it."""

    representation: CellRepresentation
    api: ModuleType
    cell_type: type

    def accepts(self, value: Any) -> bool:
        """
        Check whether a value can be a cell in this encoding.

        Only the shape of the value is checked (type, 64-bit range, bare hex
        digits); whether it names a real cell is the grid library's call.

        Args:
            value: Candidate cell or directed edge

        Returns:
            True if the value is representable in this encoding
        """
        if self.cell_type is int:
            return (
                isinstance(value, int)
                and not isinstance(value, bool)
                and 0 <= value < _MAX_INDEX
            )
        return isinstance(value, str) and _ADDRESS_PATTERN.fullmatch(value) is not None

    def to_address(self, cell: Any) -> str:
        """Convert a cell in this encoding to its address string."""
        if self.cell_type is int:
            return basic_int.int_to_str(cell)
        return cell

    def to_identifier(self, cell: Any) -> int:
        """Convert a cell in this encoding to its integer identifier."""
        if self.cell_type is int:
            return cell
        return basic_str.str_to_int(cell)


IDENTIFIER_CODEC = CellCodec(
    representation=CellRepresentation.IDENTIFIER, api=basic_int, cell_type=int
)
ADDRESS_CODEC = CellCodec(
    representation=CellRepresentation.ADDRESS, api=basic_str, cell_type=str
)

_CODECS: Dict[CellRepresentation, CellCodec] = {
    CellRepresentation.IDENTIFIER: IDENTIFIER_CODEC,
    CellRepresentation.ADDRESS: ADDRESS_CODEC,
}


def get_codec(representation) -> CellCodec:
    """Get the codec for a representation, given as enum member or its value."""
    return _CODECS[CellRepresentation(representation)]


def string_to_h3(address: Optional[str]) -> Optional[int]:
    """Convert a cell address to its integer identifier. None stays None."""
    return None if address is None else basic_str.str_to_int(address)


def h3_to_string(identifier: Optional[int]) -> Optional[str]:
    """Convert an integer identifier to its cell address. None stays None."""
    return None if identifier is None else basic_int.int_to_str(identifier)
