"""
Development Runner
==================
Prints the coprime-pair estimate of pi for N = 10000 from a source checkout,
without installing the package.

It puts 'src' on 'sys.path' so that 'from coprimepi.main import main'
resolves, then runs the same entry point as 'python -m coprimepi'.

Usage:
    $ python run.py
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from coprimepi.main import main

if __name__ == "__main__":
    main()
