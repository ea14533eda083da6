"""Parser logic that parses declaration nodes.

    declarations        --> label-declarations
    declarations-list   --> <empty>
    label-declarations  --> LABEL unsigned-integer labels-list ; | <empty>
    labels-list         --> , unsigned-integer labels-list | <empty>
    unsigned-integer    --> <constant>
    identifier          --> <identifier>

"""

import signalc.labels as labels
import signalc.token_kinds as token_kinds
from signalc.parser.utils import leaf
from signalc.tables import TokenRange


def parse_declarations(builder, tokens, errors):
    """Parse the declaration part of a block."""
    builder = builder.child(labels.declarations)
    return parse_label_declarations(builder, tokens, errors)


def parse_declarations_list(builder, tokens, errors):
    """Parse a parameter declaration list.

    Parameter declarations are not part of the grammar yet, so this always
    matches nothing.
    """
    builder = builder.child(labels.declarations_list)
    builder.empty()
    return True


def parse_label_declarations(builder, tokens, errors):
    """Parse an optional LABEL declaration.

    Ex:
        LABEL 10, 20, 30;

    """
    builder = builder.child(labels.label_declarations)

    if not leaf(builder, tokens, errors, token_kinds.label_kw.code,
                TokenRange.KEYWORDS, required=False):
        if tokens.at_end():
            return False
        builder.empty()
        return True

    return (parse_unsigned_integer(builder, tokens, errors)
            and parse_labels_list(builder, tokens, errors)
            and leaf(builder, tokens, errors, token_kinds.semicolon.code))


def parse_labels_list(builder, tokens, errors):
    """Parse the comma-separated labels after the first one.

    Each further label nests one level deeper, and the list ends with an
    Empty placeholder.
    """
    builder = builder.child(labels.labels_list)

    if not leaf(builder, tokens, errors, token_kinds.comma.code,
                required=False):
        if tokens.at_end():
            return False
        builder.empty()
        return True

    return (parse_unsigned_integer(builder, tokens, errors)
            and parse_labels_list(builder, tokens, errors))


def parse_unsigned_integer(builder, tokens, errors):
    builder = builder.child(labels.unsigned_integer)
    return leaf(builder, tokens, errors, range=TokenRange.CONSTANTS)


def parse_identifier(builder, tokens, errors):
    builder = builder.child(labels.identifier)
    return leaf(builder, tokens, errors, range=TokenRange.IDENTIFIERS)
