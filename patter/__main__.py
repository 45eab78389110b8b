"""
So that `py -m patter program.pat` works the same as the `patter` command.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from patter.cmdline import parser, main

parser.prog = "py -m patter"
main()
