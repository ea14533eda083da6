"""Objects for the lexing phase of the compiler.

The lexing phase takes the entire contents of a raw input file and
generates a flat list of tokens present in that input file. Keywords,
constants and identifiers are registered in the tables as they are met.

"""
import re

import signalc.token_kinds as token_kinds
from signalc.errors import CompilerError, Position, Range
from signalc.tables import TableError, TokenRange
from signalc.tokens import Token
from signalc.token_kinds import delimiter_kinds


class Tagged:
    """Class representing tagged characters.

    c (char) - the character that is tagged
    p (Position) - position of the tagged character
    r (Range) - a length-one range for the character
    """

    def __init__(self, c, p):
        """Initialize object."""
        self.c = c
        self.p = p
        self.r = Range(p, p)


def tokenize(code, tables, errors):
    """Convert given code into a flat list of Tokens.

    The tokens are returned and also stored as tables.tokens, ready for
    the parser. Problems are added to `errors` and lexing goes on with
    the next character, so every bad chunk is reported.
    """
    tokens = []

    lines = split_to_tagged_lines(code)

    # Tagged "(" that opened the comment currently being skipped, if any
    comment_start = None
    for line in lines:
        comment_start = tokenize_line(line, tables, tokens, errors,
                                      comment_start)

    if comment_start:
        descrip = "'*)' expected but end of file found"
        errors.add(CompilerError(descrip, comment_start.r))

    tables.tokens = tokens
    return tokens


def split_to_tagged_lines(text):
    """Split the input text into tagged lines.

    text (str) - Input file contents as a string.
    return - Tagged lines. List of list of Tagged objects, where each second
    order list is a separate line in the input progam. No newline characters.
    """
    tagged_lines = []
    for line_num, line in enumerate(text.splitlines()):
        tagged_line = []
        for col, char in enumerate(line):
            p = Position(line_num + 1, col + 1, line)
            tagged_line.append(Tagged(char, p))
        tagged_lines.append(tagged_line)

    return tagged_lines


def tokenize_line(line, tables, tokens, errors, comment_start):
    """Tokenize the given single line, appending to `tokens`.

    line - List of Tagged objects.
    comment_start - Tagged character that opened a comment still running at
    the beginning of this line, or None.
    return - The Tagged character that opened a comment still running at
    the end of this line, or None.
    """
    # line[chunk_start:chunk_end] is the section of the line currently
    # being considered for conversion into a token; this string will be
    # called the 'chunk'. Everything before the chunk has already been
    # tokenized, and everything after has not yet been examined
    chunk_start = 0
    chunk_end = 0

    while chunk_end < len(line):
        if comment_start:
            # If next characters end the comment...
            if match_text_at(line, chunk_end, "*)"):
                comment_start = None
                chunk_start = chunk_end + 2
            # Otherwise, just skip one character.
            else:
                chunk_start = chunk_end + 1
            chunk_end = chunk_start

        # If next characters start a comment, process previous chunk.
        elif match_text_at(line, chunk_end, "(*"):
            add_chunk(line[chunk_start:chunk_end], tables, tokens, errors)
            comment_start = line[chunk_end]
            chunk_start = chunk_end + 2
            chunk_end = chunk_start

        # Skip spaces and process previous chunk.
        elif line[chunk_end].c.isspace():
            add_chunk(line[chunk_start:chunk_end], tables, tokens, errors)
            chunk_start = chunk_end + 1
            chunk_end = chunk_start

        # If next character is a delimiter, add previous chunk and then
        # add the delimiter.
        elif match_delimiter_kind_at(line, chunk_end):
            kind = match_delimiter_kind_at(line, chunk_end)
            add_chunk(line[chunk_start:chunk_end], tables, tokens, errors)

            p = line[chunk_end].p
            tokens.append(Token(kind.code, kind.text_repr, p.line, p.col,
                                kind))

            chunk_start = chunk_end + 1
            chunk_end = chunk_start

        # Include another character in the chunk.
        else:
            chunk_end += 1

    # Flush out anything that is left in the chunk to the output
    add_chunk(line[chunk_start:chunk_end], tables, tokens, errors)

    return comment_start


def chunk_to_str(chunk):
    """Convert the given chunk to a string.

    chunk - list of Tagged characters.
    return - string representation of the list of Tagged characters
    """
    return "".join(c.c for c in chunk)


def match_text_at(content, start, text):
    """Return True iff `text` appears in `content` at index `start`."""
    return chunk_to_str(content[start:start + len(text)]) == text


def match_delimiter_kind_at(content, start):
    """Return the delimiter token kind at `start`, or None."""
    for kind in delimiter_kinds:
        if content[start].c == kind.text_repr:
            return kind
    return None


def add_chunk(chunk, tables, tokens, errors):
    """Convert chunk into a token if possible and add to tokens.

    If chunk is non-empty but cannot be made into a token, or the tables
    have no code left for it, this function records a compiler error. We
    don't need to check for delimiters here because they are converted
    before they are shifted into the chunk.

    chunk - Chunk to convert into a token, as list of Tagged characters.
    tables (Tables) - Tables in which the token is registered.
    tokens (List[Token]) - List of the tokens thusfar parsed.
    errors (ErrorSink) - Sink receiving the error, if any.

    """
    if not chunk:
        return

    text = chunk_to_str(chunk)
    p = chunk[0].p
    r = Range(chunk[0].p, chunk[-1].p)

    if text.isdigit():
        rng, kind = TokenRange.CONSTANTS, token_kinds.constant
    elif re.match(r"[A-Za-z][A-Za-z0-9]*$", text):
        code = tables.find(TokenRange.KEYWORDS, text)
        if code is not None:
            kind = match_keyword_kind(text)
            tokens.append(Token(code, text, p.line, p.col, kind))
            return
        rng, kind = TokenRange.IDENTIFIERS, token_kinds.identifier
    else:
        descrip = f"unrecognized token '{text}'"
        errors.add(CompilerError(descrip, r))
        return

    try:
        code = tables.add(rng, text)
    except TableError:
        category = TokenRange.NAMES[rng].lower()
        errors.add(CompilerError(f"too many {category}s: '{text}'", r))
        return

    tokens.append(Token(code, text, p.line, p.col, kind))


def match_keyword_kind(text):
    """Return the keyword token kind spelled `text`.

    Keywords registered in the tables but not listed in token_kinds are
    reported with the generic identifier kind.
    """
    for keyword_kind in token_kinds.keyword_kinds:
        if keyword_kind.text_repr == text:
            return keyword_kind
    return token_kinds.identifier
