import os
import pandas as pd
import time
from typing import Optional

from .config import CalculatorConfig
from .matrix_format import load_matrix, save_matrix
from .matrix_ops import apply_operation
from .sparse_matrix import SparseMatrix


def list_matrix_files(directory: str, suffix: str = '.txt') -> list[str]:
    """
    List the matrix files in a directory.

    Args:
        directory: Directory to scan (not recursive).
        suffix: Only files ending with this suffix are returned.

    Returns:
        Sorted list of file paths.
    """
    fns = [fn for fn in os.listdir(directory) if fn.endswith(suffix)]
    return [os.path.join(directory, fn) for fn in sorted(fns)
            if os.path.isfile(os.path.join(directory, fn))]


class SparseMatrixCalculator:
    """
    Loads two coordinate-list matrix files, applies one arithmetic operation and
    writes the result back in the same format.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        """
        Initialize the SparseMatrixCalculator

        Args:
            config: CalculatorConfig object defining the operation and output location
        """
        self.config = config if config is not None else CalculatorConfig()
        self.config.validate()

        self.operands = None
        self.result = None

    def list_inputs(self, directory: str) -> list[str]:
        """List the matrix files in directory whose names end with config.input_suffix."""
        return list_matrix_files(directory, self.config.input_suffix)

    def _log(self, msg: str) -> None:
        if self.config.verbose:
            print(msg)

    def run(self, path_a: str, path_b: str) -> SparseMatrix:
        """
        Load both matrices, apply the configured operation and optionally save the result.

        Errors from reading, parsing or the arithmetic are raised unchanged, and no
        output file is written in that case.
        """
        self._log(f"=== Sparse matrix {self.config.operation} ===")
        start_time = time.time()

        st = time.time()
        self._log(f"Loading matrices")
        matrix_a = load_matrix(path_a)
        matrix_b = load_matrix(path_b)
        self._log(f"  Matrix 1: {matrix_a.rows}x{matrix_a.cols} with {matrix_a.nnz} non-zero elements")
        self._log(f"  Matrix 2: {matrix_b.rows}x{matrix_b.cols} with {matrix_b.nnz} non-zero elements")
        self._log(f"  took: {time.time() - st} seconds")

        st = time.time()
        self._log(f"Performing {self.config.operation} operation")
        result = apply_operation(self.config.operation, matrix_a, matrix_b)
        self._log(f"  Result: {result.rows}x{result.cols} with {result.nnz} non-zero elements")
        self._log(f"  took: {time.time() - st} seconds")

        self.operands = [(os.path.basename(path_a), matrix_a), (os.path.basename(path_b), matrix_b)]
        self.result = result

        if self.config.output_path is not None:
            out_dir = os.path.dirname(self.config.output_path)
            if out_dir:
                os.makedirs(out_dir, exist_ok=True)
            save_matrix(result, self.config.output_path)
            self._log(f"Result written to: {self.config.output_path}")

        self._log(f"Total time taken: {time.time() - start_time} seconds")
        return result

    def get_result(self) -> Optional[SparseMatrix]:
        """
        Get the result of the last run
        """
        return self.result

    def get_summary(self) -> pd.DataFrame:
        """
        One row per matrix of the last run (both operands, then the result) with its shape and nnz.
        """
        if self.result is None:
            return pd.DataFrame(columns=['name', 'rows', 'cols', 'nnz'])
        named = self.operands + [('result', self.result)]
        return pd.DataFrame([{'name': name, 'rows': m.rows, 'cols': m.cols, 'nnz': m.nnz} for name, m in named])

    def export_summary(self, output_file: str) -> None:
        if self.result is None:
            print("Warning: No result is available, call run() first")
            return
        self.get_summary().to_csv(output_file, index=False)
