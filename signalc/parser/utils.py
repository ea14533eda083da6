"""Utilities for the parser.

Every parse_* function takes the same three arguments:

    builder (Builder) - insertion point in the syntax tree
    tokens (TokenStream) - tokens left to parse
    errors (ErrorSink) - where diagnostics are appended

and returns True if it matched its grammar rule, or False after recording a
diagnostic. A failure is never recovered from: the caller returns False as
well, leaving the tree as it was built up to that point.

"""

from collections import namedtuple

import signalc.labels as labels
from signalc.errors import CompilerError, Position, Range
from signalc.tables import TableError, TokenRange


class TokenStream:
    """Forward-only cursor over a list of tokens.

    The position can be saved with snapshot() and rewound with restore(),
    for grammar alternatives that need to look further than one token.
    """

    def __init__(self, tokens):
        """Initialize the stream at the first token."""
        self._tokens = tokens
        self._index = 0

    @property
    def index(self):
        """Number of tokens consumed so far."""
        return self._index

    def at_end(self):
        """Return True iff every token has been consumed."""
        return self._index >= len(self._tokens)

    def current(self):
        """Return the next unconsumed token. The stream must not be at end."""
        return self._tokens[self._index]

    def advance(self):
        """Consume the current token."""
        self._index += 1

    def snapshot(self):
        """Return a mark that restore() accepts to rewind to this position."""
        return self._index

    def restore(self, mark):
        """Rewind the stream to a position saved by snapshot()."""
        if not 0 <= mark <= self._index:
            raise ValueError(f"cannot restore token stream to {mark}")
        self._index = mark


class Builder(namedtuple("Builder", ["node", "tables"])):
    """Insertion point in the syntax tree.

    A Builder is never modified. Descending into a new child returns a new
    Builder, so a production can move its own cursor down without changing
    the node its caller keeps adding to.

    node (Node) - node that receives new children
    tables (Tables) - tables used to classify tokens
    """

    __slots__ = ()

    def child(self, label):
        """Add a child labeled `label` and return a Builder pointing to it."""
        return Builder(self.node.add_child(label), self.tables)

    def terminal(self, code):
        """Add a leaf carrying the code of a matched token."""
        self.node.add_terminal_child(code)

    def empty(self):
        """Add the placeholder for an alternative that matched nothing."""
        self.node.add_child(labels.empty)


def leaf(builder, tokens, errors, code=None, range=TokenRange.NONE,
         required=True):
    """Match the current token against a terminal of the grammar.

    code (int) - Expected token code. If None, any code in `range` matches.
    range (int) - Expected TokenRange, or TokenRange.NONE to match by code
    only.
    required (bool) - If False, a mismatch adds no diagnostic, so the caller
    can try another alternative. Reaching the end of the tokens is always
    reported.

    On a match, a terminal node is added to the tree and the token is
    consumed. On a mismatch, nothing is consumed.
    """
    if tokens.at_end():
        errors.add(CompilerError("'.' expected but EOF found"))
        return False

    token = tokens.current()
    token_range = builder.tables.range_of(token.code)

    if range != TokenRange.NONE:
        matched = token_range == range and code in (None, token.code)
    else:
        matched = token.code == code

    if not matched:
        if required:
            expected = _expected_repr(builder.tables, code, range,
                                      token_range)
            descrip = f"{expected} expected but '{token.name}' found"
            errors.add(CompilerError(descrip, token_range_of(token)))
        return False

    builder.terminal(token.code)
    tokens.advance()
    return True


def _expected_repr(tables, code, range, found_range):
    """Describe an expected terminal for a diagnostic.

    An expected keyword is named only when the token found in its place is
    itself a keyword, constant or identifier.

    Ex: Keyword 'BEGIN', Keyword, Identifier, ';'
    """
    if range == TokenRange.NONE:
        return f"'{chr(code)}'"

    expected = TokenRange.NAMES[range]
    if (range == TokenRange.KEYWORDS and code is not None
            and found_range != TokenRange.NONE):
        try:
            expected += f" '{tables.name(code)}'"
        except TableError:
            pass
    return expected


def token_range_of(token):
    """Return the source Range covered by the given token."""
    start = Position(token.line, token.column)
    end = Position(token.line, token.column + max(len(token.name), 1) - 1)
    return Range(start, end)
