"""Handles interactive/command-line mode for the rabbit interpreter. Uses cmd as backend."""

import cmd

from rabbit.interpreter import __version__
from rabbit.lang.parser import parse
from rabbit.lang.scanner import scan


class Shell(cmd.Cmd):
    """rabbit interpreter shell."""
    intro = f"Welcome to rabbit v{__version__}\nType '?' or 'help' for more information."
    prompt = ">> "
    secondary_prompt = ".. "  # used for line continuations
    _tmp_prompt = ">> "       # also used for prompt swapping in line continuations
    farewell = "Thanks for using rabbit"

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self._tmp_line = ""
        self._raw_line = ""  # latest line as typed, before cmd.Cmd strips it

    def precmd(self, line):
        """Keeps the unstripped line so error columns match what was typed."""
        self._raw_line = line
        return line

    def default(self, line):
        """Executes arbitrary rabbit statement(s), printing the value of the first."""
        if self._raw_line.strip() == line.strip():
            line = self._raw_line

        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            line, add_to_prev = self.sess.preprocess_line(line, self._tmp_line)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            self.sess.run(line)
            if self.sess.results:
                print(self.sess.pop())

    def do_tokens(self, arg):
        """Prints the tokens of a rabbit statement: tokens (+ 1 2)"""
        with self.sess.error_handler:
            self.sess.error_handler.register_source(self.sess.path, arg)
            for token in scan(arg):
                print(token)

    def do_tree(self, arg):
        """Prints the syntax tree of a rabbit statement: tree (+ 1 (* 5 3))"""
        with self.sess.error_handler:
            self.sess.error_handler.register_source(self.sess.path, arg)
            program = parse(scan(arg))
            if program:
                print(program.display())

    def do_help(self, arg):
        """Prints a short intro, or the docs of a command if one is given."""
        if arg:
            return super().do_help(arg)
        print("Welcome to the rabbit interpreter!\n\n"
              "rabbit evaluates arithmetic written in prefix notation: every statement is an \n"
              "operator followed by its arguments, wrapped in parentheses. The operators are \n"
              "+, -, *, and /, and each takes one or more arguments.\n\n"
              "Try it out by typing '(+ 1 (* 5 3))'. This will print '16'. Division is exact, \n"
              "so '(/ 10 4)' prints '5/2'. Use 'tokens' or 'tree' before a statement to see \n"
              "how it is scanned or parsed, and 'exit' to quit.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        if self._tmp_line:
            return self.default(self._raw_line)
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        print(self.farewell)
        return True
