from typing import Optional, Literal
from dataclasses import dataclass

from .constants import OPERATIONS
from .matrix_errors import InvalidOperationError


@dataclass
class CalculatorConfig:
    """
    Configuration for SparseMatrixCalculator.
    
    Selects the arithmetic operation to apply and where inputs are looked up
    and the result is written.
    """
    
    operation: Literal['add', 'subtract', 'multiply'] = 'add'
    """Operation applied to the two input matrices:
    - 'add': element-wise sum, shapes must match
    - 'subtract': element-wise difference (first - second), shapes must match
    - 'multiply': matrix product, first.cols must equal second.rows
    """
    
    input_suffix: str = '.txt'
    """File suffix used when scanning a directory for matrix files."""
    
    output_path: Optional[str] = None
    """Where the result matrix is written. If None, the result is only kept in memory."""
    
    verbose: bool = True
    """Whether to print progress and timing information."""

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.operation not in OPERATIONS:
            raise InvalidOperationError(self.operation, OPERATIONS)
        if not self.input_suffix:
            raise ValueError("input_suffix cannot be empty")
