"""Classes for representing tokens.

A TokenKind instance represents one of the kinds of tokens recognized (see
token_kinds.py). A Token instance represents a token as produced by the lexer.

"""

from collections import namedtuple


class TokenKind:
    """Class representing the various known kinds of tokens.

    Ex: ;, (, PROGRAM, BEGIN

    There are also token kind instances for each of 'identifier' and
    'constant'. See token_kinds.py for a list of token_kinds defined.

    text_repr (str) - The token's representation in text, if it has a fixed
    representation.
    code (int) - The code every token of this kind carries, if it is fixed.
    Keywords use their table code, delimiters the ordinal of the character.

    """

    def __init__(self, text_repr="", code=None, kinds=None):
        """Initialize a new TokenKind and add it to `kinds`.

        kinds (List[TokenKind]) - List of kinds to which this TokenKind is
        added. This is convenient when defining token kinds in token_kinds.py.

        """
        self.text_repr = text_repr
        self.code = code
        if kinds is not None:
            kinds.append(self)

    def __str__(self):
        """Return the representation of this token kind."""
        return self.text_repr


class Token(namedtuple("Token", ["code", "name", "line", "column", "kind"])):
    """Single unit element of the input as produced by the lexer.

    code (int) - Identity of the terminal. Delimiters use the ordinal of
    their character, keywords, identifiers and constants the code assigned
    to them in the tables.
    name (str) - Text of the token as it appeared in the source.
    line (int), column (int) - 1-based position of the first character.
    kind (TokenKind) - Lexical category. Informational only; the parser
    classifies tokens through the tables.

    """

    __slots__ = ()

    def __str__(self):
        """Return the token text."""
        return self.name
