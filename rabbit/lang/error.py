"""Error handling for the rabbit language. Only RabbitErrors should be encountered during running: if another type of
error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class RabbitError(Exception):
    """Templates an error message so that it can be used to throw a rabbit error. exprs are formatted into msg, and
    exprs[0] should be the offending text. line and column are 1-based and point at the start of the offending text.
    """
    kind = "error"

    def __init__(self, msg, exprs=None, line=None, column=None, end=-1, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.template = msg
        self.exprs = [str(expr) for expr in exprs]
        self.expr = self.exprs[0]

        self.line = line
        self.column = column
        self.end = end if end != -1 else (column or 1) + max(len(self.expr), 1)  # exclusive, needed for display
        self.internal = internal

        super().__init__(str(self))

    @property
    def msg(self):
        return self.template.format(*self.exprs)

    def highlighted(self):
        """Returns msg with expr snippets bolded."""
        return self.template.format(*(colored(expr, attrs=["bold"]) for expr in self.exprs))

    def __str__(self):
        if self.line is None:
            return self.msg
        return f"{self.msg} in line {self.line}, column {self.column}"


class LexicalError(RabbitError):
    """Raised by the scanner when a run of characters matches none of the token shapes."""
    kind = "lexical error"

    def __init__(self, text, line, column):
        super().__init__("unexpected token '{}'", text, line, column)


class ParseError(RabbitError):
    """Raised by the parser on a structurally invalid token sequence. expected describes what should have been there."""
    kind = "syntax error"

    def __init__(self, expected, found, line, column, end=-1):
        self.expected = expected
        super().__init__("expected {1}, found '{0}'", [found, expected], line, column, end)


class EvaluationError(RabbitError):
    """Raised by the evaluator. Division by zero is the only case reachable from parsed input."""
    kind = "evaluation error"


class ErrorHandler:
    """Context manager that will silently suppress Python errors and print rabbit errors."""
    ERROR = "red"
    STEP = "cyan"

    def __init__(self, fatal=True, trace=False):
        self.fatal = fatal
        self.trace = trace
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = None

    def register_source(self, path, source):
        """Registers source text in traceback given path. Should be called prior to Session run."""
        self.traceback[path] = source

    def remove_source(self, path):
        """Removes source from traceback given path. Should be called after successful Session run."""
        self.traceback[path] = None

    def register_step(self, label, expr):
        """Prints an evaluation step if tracing is enabled."""
        if self.trace:
            print(colored(f"{label} ", ErrorHandler.STEP, attrs=["bold"]) + str(expr))

    @staticmethod
    def diagnose(error, source_line, color=ERROR):
        """Returns offending part of source_line highlighted and bolded, with a caret marker beneath it."""
        start = error.column - 1
        end = max(error.end - 1, start + 1)

        diagnosis = "  " + source_line[:start]
        diagnosis += colored(source_line[start:end], color, attrs=["bold"])
        diagnosis += source_line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), color, attrs=["bold"])

        return diagnosis

    def _locate(self, error):
        """Returns (file, offending source line) for error, or (file, None) if it cannot be located."""
        file, source = next(reversed(self.traceback.items()), (None, None))
        if source is None or error.line is None:
            return file, None

        lines = source.split("\n")
        if not 0 < error.line <= len(lines):
            return file, None
        return file, lines[error.line - 1]

    def _report(self, error, label, color):
        file, source_line = self._locate(error)

        error_msg = ""
        if file is not None and error.line is not None:
            error_msg += colored(f"{file}:{error.line}:{error.column}: ", attrs=["bold"])
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])
        error_msg += colored(f"{label}: ", color, attrs=["bold"]) + error.highlighted()
        print(error_msg)

        if not error.internal and source_line is not None:
            print(ErrorHandler.diagnose(error, source_line, color))

    def throw(self, error):
        """Prints error using self.traceback to find the offending line. error must be a RabbitError."""
        self._report(error, error.kind, ErrorHandler.ERROR)

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: None for path in self.traceback}  # if error occurred, reset traceback

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(RabbitError("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(RabbitError("expression nested too deeply"))
        elif exc_type is not None and issubclass(exc_type, RabbitError):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(RabbitError("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
