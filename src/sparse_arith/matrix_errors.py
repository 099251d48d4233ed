
class SparseMatrixError(ValueError):
    """Base class for sparse matrix errors."""
    pass

class MatrixFormatError(SparseMatrixError):
    """Base class for errors in the coordinate-list text format."""
    pass



class MalformedHeaderError(MatrixFormatError):
    """Raised when the rows=/cols= header lines are missing or unparsable."""
    
    def __init__(self, line_number: int = None, line: str = None):
        self.line_number = line_number
        self.line = line
        if line_number is None:
            message = "Missing row/column definitions: expected 'rows=<n>' and 'cols=<n>' header lines"
        else:
            message = f"Malformed header at line {line_number}: \"{line}\""
        super().__init__(message)


class MalformedEntryError(MatrixFormatError):
    """Raised when a data line does not match the (row, col, value) grammar."""
    
    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        message = f"Malformed entry at line {line_number}: \"{line}\""
        super().__init__(message)


class IndexOutOfBoundsError(SparseMatrixError, IndexError):
    """Raised when a coordinate falls outside the declared matrix dimensions."""
    
    def __init__(self, row: int, col: int, rows: int, cols: int, line_number: int = None):
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols
        self.line_number = line_number
        
        message = f"Index out of bounds: ({row}, {col}) for matrix of size {rows}x{cols}"
        if line_number is not None:
            message += f" at line {line_number}"
        super().__init__(message)


class DimensionMismatchError(SparseMatrixError):
    """Raised when operand shapes are incompatible with the requested operation."""
    
    def __init__(self, operation: str, left_shape: tuple[int, int], right_shape: tuple[int, int]):
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
        message = (
            f"Matrix dimensions incompatible for {operation}: "
            f"{left_shape[0]}x{left_shape[1]} and {right_shape[0]}x{right_shape[1]}"
        )
        super().__init__(message)


class InvalidDimensionsError(SparseMatrixError):
    """Raised when matrix dimensions are negative or not integers."""
    
    def __init__(self, rows, cols):
        self.rows = rows
        self.cols = cols
        message = f"Matrix dimensions must be non-negative integers, got rows={rows!r} cols={cols!r}"
        super().__init__(message)


class InvalidValueError(SparseMatrixError, TypeError):
    """Raised when a stored value is not a signed integer."""
    
    def __init__(self, value):
        self.value = value
        message = f"Matrix values must be integers, got {value!r} ({type(value).__name__})"
        super().__init__(message)


class InvalidOperationError(SparseMatrixError):
    """Raised when an unknown arithmetic operation is requested."""
    
    def __init__(self, operation: str, valid_operations: list):
        self.operation = operation
        self.valid_operations = valid_operations
        message = f"Invalid operation '{operation}'. Must be one of: {valid_operations}"
        super().__init__(message)
