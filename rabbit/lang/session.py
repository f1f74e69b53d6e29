"""Session control for rabbit. Runs source text through the interpreter, either in command-line mode or file
interpretation mode, registering it with the error handler so errors can point at the offending line.
"""

from rabbit.interpreter import interpret
from rabbit.lang.error import RabbitError
from rabbit.lang.numerical import display


class Session:
    """Governs a rabbit session: one error handler, one source path and the results of the latest run."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.source = ""          # source text of the latest run
        self.results = []         # values of the latest run

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    self.source = file.read()
            except OSError:
                raise RabbitError("'{}' could not be opened", path)

        elif not cmd_line:
            raise RabbitError("'{}' is a reserved filename", Session.SH_FILE)

    @staticmethod
    def preprocess_line(line, prev=""):
        """Preprocesses a line from the command-line. prev is the text of any unfinished previous lines. Returns the
        joined text and whether or not a line continuation is necessary (more '(' than ')' so far).
        """
        line = f"{prev}\n{line}" if prev else line
        return line.rstrip(), line.count("(") > line.count(")")

    def trace(self, node, value):
        self.error_handler.register_step("=>", f"{node} = {display(value)}")

    def run(self, text=None):
        """Interprets text (default: the file this session was opened with) and stores its values in self.results.
        Will raise any errors that are encountered.
        """
        if text is not None:
            self.source = text

        self.error_handler.register_source(self.path, self.source)  # in case error is raised
        self.results = []
        self.results = interpret(self.source, self.trace)
        self.error_handler.remove_source(self.path)  # error was not raised

        return self.results

    def pop(self):
        """Returns the display form of the first result of the latest run, and clears the results."""
        result = display(self.results[0])
        self.results = []
        return result
