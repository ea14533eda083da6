"""Tables of keywords, identifiers and constants.

Every keyword, identifier and constant seen in the source is assigned a
numeric code. The code ranges do not overlap, so the classification of a
token can be recovered from its code alone:

    [0, 301)     delimiters, coded by the ordinal of their character; never
                 registered in the tables
    [301, 501)   keywords
    [501, 1001)  constants
    [1001, ...)  identifiers

The tables also carry the token list produced by the lexer, which is the
input of the parser.

"""

import signalc.token_kinds as token_kinds


class TableError(LookupError):
    """Raised when a code is not registered or a range is exhausted."""

    pass


class TokenRange:
    """Classification buckets for token codes.

    The value of each bucket is the first code of its range, except NONE.
    """

    NONE = 0
    KEYWORDS = 301
    CONSTANTS = 501
    IDENTIFIERS = 1001

    # Exclusive upper bound of each range.
    LIMITS = {KEYWORDS: CONSTANTS,
              CONSTANTS: IDENTIFIERS,
              IDENTIFIERS: None}

    NAMES = {KEYWORDS: "Keyword",
             CONSTANTS: "Constant",
             IDENTIFIERS: "Identifier"}


def _range_containing(code):
    """Return the range whose interval contains `code`, or NONE."""
    for begin, limit in TokenRange.LIMITS.items():
        if code >= begin and (limit is None or code < limit):
            return begin
    return TokenRange.NONE


class Tables:
    """Code tables for the keywords, constants and identifiers of a program.

    keywords (List[TokenKind]) - keyword kinds registered at creation, with
    the codes they declare.
    tokens (List[Token]) - token list filled in by the lexer.
    """

    def __init__(self, keywords=None):
        """Initialize tables with the given keyword kinds."""
        self._names = {}
        self._codes = {rng: {} for rng in TokenRange.LIMITS}
        self._next = {rng: rng for rng in TokenRange.LIMITS}
        self.tokens = []

        if keywords is None:
            keywords = token_kinds.keyword_kinds
        for kind in keywords:
            self.add(TokenRange.KEYWORDS, kind.text_repr, kind.code)

    def add(self, rng, name, code=None):
        """Register `name` in the given range and return its code.

        If `name` is already registered in that range, its existing code is
        returned. Otherwise the next free code of the range is used, unless
        `code` is given explicitly.
        """
        if rng not in self._codes:
            raise TableError(f"cannot register '{name}' without a range")

        existing = self._codes[rng].get(name)
        if existing is not None:
            return existing

        if code is None:
            code = self._next[rng]
            while code in self._names:
                code += 1

        if _range_containing(code) != rng or code in self._names:
            raise TableError(f"code {code} is not available for '{name}'")

        self._names[code] = name
        self._codes[rng][name] = code
        self._next[rng] = max(self._next[rng], code + 1)
        return code

    def find(self, rng, name):
        """Return the code of `name` in the given range, or None."""
        return self._codes.get(rng, {}).get(name)

    def get_range(self, code):
        """Return the range of a registered code.

        Raises TableError if the code was never registered.
        """
        if code not in self._names:
            raise TableError(f"code {code} is not registered")
        return _range_containing(code)

    def range_of(self, code):
        """Return the range of `code`, or TokenRange.NONE if unregistered.

        Delimiters are matched by raw code, so they need not be registered.
        """
        try:
            return self.get_range(code)
        except TableError:
            return TokenRange.NONE

    def name(self, code):
        """Return the name registered for `code`."""
        try:
            return self._names[code]
        except KeyError:
            raise TableError(f"code {code} is not registered") from None

    def display_name(self, code):
        """Return a printable name for any token code."""
        try:
            return self.name(code)
        except TableError:
            return chr(code)
