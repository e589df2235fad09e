from .errors import (
    ColumnOutOfRange,
    ConfigurationError,
    DispatcherError,
    FileOperationError,
    GootragoError,
    InvalidColumnReference,
)
from .sheet_index import SheetIndex

__all__ = [
    'ColumnOutOfRange',
    'ConfigurationError',
    'DispatcherError',
    'FileOperationError',
    'GootragoError',
    'InvalidColumnReference',
    'SheetIndex',
]
