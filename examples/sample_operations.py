import os
import sys

# Add the src directory to Python path to import local sparse_arith
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


from sparse_arith import SparseMatrixCalculator, CalculatorConfig


def main():
    script_dir = os.path.dirname(os.path.abspath(__file__))
    input_dir = os.path.join(script_dir, 'sample_inputs')
    output_dir = os.path.join(script_dir, 'output')

    matrix_files = SparseMatrixCalculator().list_inputs(input_dir)
    print("Available matrices:")
    for idx, fp in enumerate(matrix_files):
        print(f"  {idx + 1}. {os.path.basename(fp)}")

    a_fp, b_fp, c_fp = [os.path.join(input_dir, fn) for fn in ['matrix_a.txt', 'matrix_b.txt', 'matrix_c.txt']]
    jobs = [
        ('add', a_fp, b_fp),
        ('subtract', a_fp, b_fp),
        ('multiply', a_fp, c_fp),
    ]
    for operation, left, right in jobs:
        config = CalculatorConfig(operation=operation, output_path=os.path.join(output_dir, f'{operation}.txt'))
        calc = SparseMatrixCalculator(config)
        calc.run(left, right)
        print(calc.get_summary())
        print()


if __name__ == "__main__":
    main()
