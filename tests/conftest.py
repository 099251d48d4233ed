import os
import sys

# Add the src directory and this directory to the Python path to import local sparse_arith
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.dirname(__file__))
