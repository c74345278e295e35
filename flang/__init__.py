import sys

from flang.parser.parser import Parser, parse_program
from flang.scanner.scanner import Scanner
from flang.token import Token
from flang.tree.printer import Printer
from flang.type import Type

# Default is 1000, every nested list costs a few frames
sys.setrecursionlimit(5000)
