"""Main executable for the signalc front end."""

import argparse
import sys

import signalc.lexer as lexer
from signalc.errors import CompilerError, ErrorSink
from signalc.parser.parser import analyze
from signalc.tables import Tables


def main():
    """Run the main front end script.

    Returns 0 if every file was lexed and parsed without errors, else 1.
    """
    arguments = get_arguments()

    results = []
    for file in arguments.files:
        results.append(process_file(file, arguments))

    return 0 if all(results) else 1


def process_file(file, args):
    """Lex and parse a single file, printing the results.

    Returns True iff no errors were found.
    """
    if not file.endswith(".sig"):
        file += ".sig"

    errors = ErrorSink()
    code = read_file(file, errors)
    if not errors.ok():
        errors.show()
        return False

    tables = Tables()
    tokens = lexer.tokenize(code, tables, errors)
    if args.show_tokens:
        for token in tokens:
            print(f"{token.line}\t{token.column}\t{token.code}\t{token.name}")
        print()

    # The tree is printed even when parsing failed, showing how far the
    # parser got.
    tree = analyze(tables, errors)
    if not args.hide_tree and not tree.empty():
        for line in tree.listing(tables):
            print(line)

    errors.show()
    return errors.ok()


def get_arguments():
    """Get the command-line arguments.

    This function sets up the argument parser. Returns an object storing
    the argument values, including the list of file names provided on
    command line.
    """
    desc = """Lex and parse SIGNAL programs and print their syntax tree.
    Option flags starting with `-z` are primarily for debugging or
    diagnostic purposes."""
    parser = argparse.ArgumentParser(
        description=desc, usage="signalc [-h] [options] files...")

    # Files to parse
    parser.add_argument("files", metavar="files", nargs="+")

    parser.add_argument("-z-tokens",
                        help="display the token list produced by the lexer",
                        dest="show_tokens", action="store_true")

    parser.add_argument("-z-no-tree",
                        help="do not display the syntax tree",
                        dest="hide_tree", action="store_true")

    return parser.parse_args()


def read_file(file, errors):
    """Return the contents of the given file."""
    try:
        with open(file, encoding="utf-8") as sig_file:
            return sig_file.read()
    except (IOError, UnicodeDecodeError):
        descrip = f"could not read file: '{file}'"
        errors.add(CompilerError(descrip))


if __name__ == "__main__":
    sys.exit(main())
