"""Labels for the non-terminal nodes of the syntax tree.

Terminal nodes are not labeled by a Label; they carry the raw code of the
token they matched.

"""


class Label:
    """Tag identifying the grammar construct a tree node stands for.

    name (str) - Name of the construct, like "ProcedureIdentifier".
    """

    def __init__(self, name, labels):
        """Initialize a new Label and add it to `labels`."""
        self.name = name
        labels.append(self)

    def __str__(self):
        """Return the label as printed in a tree listing.

        Ex: ProcedureIdentifier -> <procedure-identifier>
        """
        words = []
        word = ""
        for char in self.name:
            if char.isupper() and word:
                words.append(word)
                word = ""
            word += char.lower()
        words.append(word)
        return "<" + "-".join(words) + ">"

    def __repr__(self):  # pragma: no cover
        return self.name


all_labels = []

signal_program = Label("SignalProgram", all_labels)
program = Label("Program", all_labels)
procedure_identifier = Label("ProcedureIdentifier", all_labels)
block = Label("Block", all_labels)
parameters_list = Label("ParametersList", all_labels)
declarations = Label("Declarations", all_labels)
declarations_list = Label("DeclarationsList", all_labels)
statements_list = Label("StatementsList", all_labels)
label_declarations = Label("LabelDeclarations", all_labels)
labels_list = Label("LabelsList", all_labels)
unsigned_integer = Label("UnsignedInteger", all_labels)
identifier = Label("Identifier", all_labels)

# Placeholder for a grammar alternative that matched nothing.
empty = Label("Empty", all_labels)
