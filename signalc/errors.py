"""Objects used for error reporting.

Every phase adds its diagnostics to an ErrorSink, which the main executable
prints for the user once the phases have run.

"""

import sys


class ErrorSink:
    """Ordered, append-only collection of diagnostic strings.

    Each compiler phase receives the sink and appends a description of
    every problem it finds. A phase may refuse to run when the sink is
    already non-empty, because an earlier phase failed.
    """

    def __init__(self):
        """Initialize the ErrorSink with no issues."""
        self.issues = []

    def add(self, issue):
        """Append the given issue (CompilerError or str) to the sink."""
        self.issues.append(str(issue))

    def ok(self):
        """Return True iff there are no errors."""
        return not self.issues

    def show(self, file=None):  # pragma: no cover
        """Display all errors."""
        for issue in self.issues:
            print(issue, file=file or sys.stderr)

    def __len__(self):
        return len(self.issues)

    def __iter__(self):
        return iter(self.issues)

    def __getitem__(self, index):
        return self.issues[index]


class Position:
    """Class representing a position in source code.

    line (int) - Line number in file at which this position is located.
    col (int) - Horizontal column at which this position is located.
    full_line (str) - Full text of the line containing this position.
    Specifically, full_line[col - 1] should be this position.
    """

    def __init__(self, line, col, full_line=""):
        """Initialize Position object."""
        self.line = line
        self.col = col
        self.full_line = full_line


class Range:
    """Class representing a continuous range between two positions.

    start (Position) - start position, inclusive
    end (Position) - end position, inclusive
    """

    def __init__(self, start, end=None):
        """Initialize Range objects."""
        self.start = start
        self.end = end or start


class CompilerError(Exception):
    """Class representing compile-time errors.

    descrip (str) - User-friendly explanation of the error, such as
    "';' expected but 'BEGIN' found".
    range (Range) - Range at which the error appears, or None when the
    error has no source location (for example, end of file).
    """

    def __init__(self, descrip, range=None):
        """Initialize error."""
        super().__init__(descrip)
        self.descrip = descrip
        self.range = range

    def __str__(self):
        """Return the diagnostic as it is stored in the ErrorSink.

        Example:
            Error (line: 1, column: 11): ';' expected but 'BEGIN' found
        """
        if self.range:
            return (f"Error (line: {self.range.start.line}, "
                    f"column: {self.range.start.col}): {self.descrip}")
        else:
            return f"Error: {self.descrip}"
