"""The token kinds currently recognized."""

from signalc.tokens import TokenKind

keyword_kinds = []
delimiter_kinds = []

program_kw = TokenKind("PROGRAM", 301, keyword_kinds)
procedure_kw = TokenKind("PROCEDURE", 302, keyword_kinds)
begin_kw = TokenKind("BEGIN", 303, keyword_kinds)
end_kw = TokenKind("END", 304, keyword_kinds)
label_kw = TokenKind("LABEL", 305, keyword_kinds)

semicolon = TokenKind(";", ord(";"), delimiter_kinds)
dot = TokenKind(".", ord("."), delimiter_kinds)
comma = TokenKind(",", ord(","), delimiter_kinds)
open_paren = TokenKind("(", ord("("), delimiter_kinds)
close_paren = TokenKind(")", ord(")"), delimiter_kinds)

identifier = TokenKind()
constant = TokenKind()
