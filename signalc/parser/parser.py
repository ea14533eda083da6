"""Entry point for the parser logic that converts a token list to a tree.

Each parse_* function corresponds to a unique non-terminal symbol in the
SIGNAL grammar:

    signal-program      --> program
    program             --> PROGRAM procedure-identifier ; block .
                          | PROCEDURE procedure-identifier parameters-list ;
                            block ;
    procedure-identifier --> identifier
    block               --> declarations BEGIN statements-list END
    parameters-list     --> ( declarations-list ) | <empty>

The declaration and statement rules live in declaration.py and
statement.py. See utils.py for the calling convention shared by every
parse_* function.

"""

import signalc.labels as labels
import signalc.token_kinds as token_kinds
from signalc.parser.declaration import (parse_declarations,
                                        parse_declarations_list,
                                        parse_identifier)
from signalc.parser.statement import parse_statements_list
from signalc.parser.utils import Builder, TokenStream, leaf
from signalc.tables import TokenRange
from signalc.tree import SyntaxTree


def analyze(tables, errors):
    """Parse tables.tokens into a SyntaxTree.

    If `errors` already holds diagnostics from an earlier phase, no token is
    parsed and the returned tree has only its root. Otherwise the tree holds
    everything parsed up to the first error, if there is one.
    """
    tree = SyntaxTree()
    if errors:
        return tree

    builder = Builder(tree.root, tables)
    tokens = TokenStream(tables.tokens)
    parse_signal_program(builder, tokens, errors)
    return tree


def parse_signal_program(builder, tokens, errors):
    """Parse a whole program into the root node held by `builder`."""
    return parse_program(builder, tokens, errors)


def parse_program(builder, tokens, errors):
    """Parse a program or a procedure.

    The leading keyword decides which: PROGRAM is tried without reporting a
    mismatch, and if it does not match, PROCEDURE is required.
    """
    builder = builder.child(labels.program)

    if leaf(builder, tokens, errors, token_kinds.program_kw.code,
            TokenRange.KEYWORDS, required=False):
        return (parse_procedure_identifier(builder, tokens, errors)
                and leaf(builder, tokens, errors, token_kinds.semicolon.code)
                and parse_block(builder, tokens, errors)
                and leaf(builder, tokens, errors, token_kinds.dot.code))

    if tokens.at_end():
        return False

    return (leaf(builder, tokens, errors, token_kinds.procedure_kw.code,
                 TokenRange.KEYWORDS)
            and parse_procedure_identifier(builder, tokens, errors)
            and parse_parameters_list(builder, tokens, errors)
            and leaf(builder, tokens, errors, token_kinds.semicolon.code)
            and parse_block(builder, tokens, errors)
            and leaf(builder, tokens, errors, token_kinds.semicolon.code))


def parse_procedure_identifier(builder, tokens, errors):
    """Parse the name of a program or procedure."""
    builder = builder.child(labels.procedure_identifier)
    return parse_identifier(builder, tokens, errors)


def parse_block(builder, tokens, errors):
    """Parse declarations followed by a BEGIN ... END statement list."""
    builder = builder.child(labels.block)
    return (parse_declarations(builder, tokens, errors)
            and leaf(builder, tokens, errors, token_kinds.begin_kw.code,
                     TokenRange.KEYWORDS)
            and parse_statements_list(builder, tokens, errors)
            and leaf(builder, tokens, errors, token_kinds.end_kw.code,
                     TokenRange.KEYWORDS))


def parse_parameters_list(builder, tokens, errors):
    """Parse an optional parenthesized parameter declaration list."""
    builder = builder.child(labels.parameters_list)

    if not leaf(builder, tokens, errors, token_kinds.open_paren.code,
                required=False):
        if tokens.at_end():
            return False
        builder.empty()
        return True

    return (parse_declarations_list(builder, tokens, errors)
            and leaf(builder, tokens, errors, token_kinds.close_paren.code))
