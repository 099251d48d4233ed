import re


class MatrixFormat:
    ROWS_KEY = "rows"
    COLS_KEY = "cols"

    ROWS_PATTERN = re.compile(r"^\s*rows\s*=\s*(\d+)\s*$", re.ASCII)
    COLS_PATTERN = re.compile(r"^\s*cols\s*=\s*(\d+)\s*$", re.ASCII)
    ENTRY_PATTERN = re.compile(r"^\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(-?\d+)\s*\)\s*$", re.ASCII)

    ENTRY_TEMPLATE = "({row}, {col}, {value})"


class Operation:
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"


OPERATIONS = [Operation.ADD, Operation.SUBTRACT, Operation.MULTIPLY]
