"""Parser logic that parses statement nodes.

    statements-list --> <empty>

"""

import signalc.labels as labels


def parse_statements_list(builder, tokens, errors):
    """Parse the statements of a block.

    Statements are not part of the grammar yet, so this always matches
    nothing.
    """
    builder = builder.child(labels.statements_list)
    builder.empty()
    return True
