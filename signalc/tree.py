"""Classes for the syntax tree produced by the parser.

The tree is grown top-down. A node is only ever created as the child of an
existing node, so each node except the root has exactly one parent, and the
children of a node are never removed or reordered.

"""

import signalc.labels as labels


class Node:
    """Single node of the syntax tree.

    label (Label or int) - A Label for a non-terminal node, or the code of
    the matched token for a terminal node.
    children (List[Node]) - Owned child nodes, in source order.
    """

    def __init__(self, label):
        """Initialize node."""
        self.label = label
        self.children = []

    @property
    def terminal(self):
        """Return True iff this node carries a raw token code."""
        return isinstance(self.label, int)

    def add_child(self, label):
        """Append a new child with the given label and return it."""
        child = Node(label)
        self.children.append(child)
        return child

    def add_terminal_child(self, code):
        """Append a leaf carrying the given token code and return it."""
        return self.add_child(code)

    def __eq__(self, other):
        """Compare labels and children recursively."""
        if not isinstance(other, Node):
            return NotImplemented
        return self.label == other.label and self.children == other.children

    def __repr__(self):  # pragma: no cover
        if not self.children:
            return f"Node({self.label!r})"
        return f"Node({self.label!r}, {self.children!r})"


class SyntaxTree:
    """Syntax tree of one SIGNAL program.

    root (Node) - Node labeled SignalProgram. It has no children when
    analysis was not run because an earlier phase failed.
    """

    def __init__(self):
        """Initialize a tree with just a root."""
        self.root = Node(labels.signal_program)

    def __eq__(self, other):
        if not isinstance(other, SyntaxTree):
            return NotImplemented
        return self.root == other.root

    def empty(self):
        """Return True iff the root has no children."""
        return not self.root.children

    def listing(self, tables):
        """Return the tree as a list of indented text lines.

        Non-terminals are printed as their label, terminals as their code
        followed by their name. Each level of depth adds two dots.

        Ex:
            <signal-program>
            ..<program>
            ....301 PROGRAM
        """
        lines = []
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            indent = ".." * depth
            if node.terminal:
                name = tables.display_name(node.label)
                lines.append(f"{indent}{node.label} {name}")
            else:
                lines.append(f"{indent}{node.label}")
            for child in reversed(node.children):
                stack.append((child, depth + 1))
        return lines
