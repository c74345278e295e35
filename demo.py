from flang import Parser, Scanner, Type
from flang.__main__ import open_file
from flang.error.communicator import Communicator

# Load a program string,
program = open_file("data/valid/test2.fl")
# or define a program manually
program = r"""
(func sum (n)
    (prog (total)
        (setq total 0)
        (while (greater n 0)
            (setq total (plus total n))
            (setq n (minus n 1)))
        (return total)))

(sum 10)
"""

# Perform scanning on the input program, token by token
scanner = Scanner(program)
tokens = Scanner(program).scan()
print(" ".join(token.text for token in tokens if token.type != Type.EOL))

# Perform parsing, pulling the tokens from the scanner
parser = Parser(scanner)
tree = parser.parse()
Communicator.report(scanner.warnings)

# Print out the tree
print("=" * 25)
print("Program:")
print("=" * 25)
print(tree)
