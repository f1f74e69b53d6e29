from contextlib import redirect_stdout
import io
import unittest

from rabbit.lang.error import ErrorHandler
from rabbit.lang.session import Session
from rabbit.lang.shell import Shell


def run_shell(*lines):
    """Feeds lines to a fresh Shell and returns everything it printed, one entry per output line."""
    out = io.StringIO()
    with redirect_stdout(out):
        shell = Shell(Session(ErrorHandler(), Session.SH_FILE, cmd_line=True), stdin=io.StringIO("\n".join(lines) + "\n"))
        shell.use_rawinput = False
        shell.cmdloop()
    return out.getvalue().replace(Shell.prompt, "").replace(Shell.secondary_prompt, "").splitlines()


class ShellTestCase(unittest.TestCase):

    def test_intro_and_farewell(self):
        output = run_shell()
        self.assertTrue(output[0].startswith("Welcome to rabbit v"))
        self.assertEqual(Shell.farewell, output[-1])

    def test_prints_first_result(self):
        output = run_shell("(+ 1 (* 5 3))", "(/ 10 4)", "(- 10)(* 2 3 4)")
        self.assertIn("16", output)
        self.assertIn("5/2", output)
        self.assertIn("10", output)
        self.assertNotIn("24", output)

    def test_continues_after_error(self):
        output = run_shell("(+ 1 @)", "(/ 1 0)", "5", "(* 2 3 4)")
        self.assertIn("24", output)
        self.assertTrue(any("unexpected token" in line for line in output))
        self.assertTrue(any("division by zero" in line for line in output))
        self.assertTrue(any("'(' to start a statement" in line for line in output))

    def test_columns_keep_leading_whitespace(self):
        output = run_shell("    (+ 1 @)")
        self.assertTrue(any("<in>:1:10: " in line for line in output))

        output = run_shell("(+ 1", "   @)")
        self.assertTrue(any("<in>:2:4: " in line for line in output))

        output = run_shell("  (/ 4 0)")
        self.assertTrue(any("<in>:1:4: " in line for line in output))

    def test_line_continuation(self):
        output = run_shell("(+ 1", "", "(* 5 3))")
        self.assertIn("16", output)

    def test_empty_line(self):
        output = run_shell("", "   ", "(+ 2 2)")
        self.assertIn("4", output)

    def test_tokens_and_tree(self):
        output = run_shell("tokens (+ 1 2)", "tree (+ 1 (* 5 3))")
        self.assertIn("OPERATOR('+') at 1:2", output)
        self.assertIn("INTEGER_LITERAL('2') at 1:6", output)
        self.assertIn("    Operation('*', arguments=[", output)

    def test_exit(self):
        output = run_shell("exit", "(+ 1 1)")
        self.assertEqual(Shell.farewell, output[-1])
        self.assertNotIn("2", output)

    def test_help(self):
        output = run_shell("help")
        self.assertIn("Welcome to the rabbit interpreter!", output)

        output = run_shell("help tokens")
        self.assertIn("Prints the tokens of a rabbit statement: tokens (+ 1 2)", output)


if __name__ == '__main__':
    unittest.main()
