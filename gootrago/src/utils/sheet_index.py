import re
from typing import List, Sequence

from .errors import ColumnOutOfRange, InvalidColumnReference

_DECIMAL = re.compile(r"[+-]?[0-9]+\Z")


class SheetIndex:
    """Helper class to handle column references consistently.

    Columns are addressed 1-based, either by number ("3") or by spreadsheet
    letters ("C"). Letters use bijective base-26: there is no zero digit, so
    Z = 26 is followed by AA = 27.
    """

    @staticmethod
    def to_column_letter(n: int) -> str:
        """Convert column number to letter (1 = A, 27 = AA)."""
        result = ""
        while n > 0:
            n, remainder = divmod(n - 1, 26)
            result = chr(65 + remainder) + result
        return result

    @staticmethod
    def from_column_letter(col: str) -> int:
        """Convert column letter to number (A = 1, AA = 27).

        Returns 0 for an empty string or any character outside A..Z, which
        callers treat as out of range.
        """
        if not col:
            return 0
        result = 0
        for char in col:
            if char < 'A' or char > 'Z':
                return 0
            result = result * 26 + (ord(char) - ord('A') + 1)
        return result

    @staticmethod
    def describe(index: int) -> str:
        """Human readable column label, e.g. '3 (C)'."""
        return f"{index} ({SheetIndex.to_column_letter(index)})"

    @staticmethod
    def decode_reference(reference: str, row_width: int) -> int:
        """Decode one column reference into a validated 1-based index.

        Args:
            reference: Column number ("3") or column letters ("C", "aa")
            row_width: Number of fields in the row, at least 1

        Raises:
            InvalidColumnReference: token is not a number and not letters
            ColumnOutOfRange: decoded index is outside 1..row_width
        """
        token = reference.strip().upper()

        if token and 'A' <= token[0] <= 'Z':
            index = SheetIndex.from_column_letter(token)
        elif not token:
            index = 0
        elif _DECIMAL.match(token):
            index = int(token)
        else:
            raise InvalidColumnReference(reference)

        if index < 1 or index > row_width:
            raise ColumnOutOfRange(reference, row_width)
        return index

    @staticmethod
    def decode_references(references: Sequence[str], row_width: int) -> List[int]:
        """Decode a list of references, keeping order and duplicates.

        An empty list stays empty: the caller reads it as "the whole row".
        The first bad reference aborts the whole list.
        """
        return [SheetIndex.decode_reference(ref, row_width) for ref in references]
