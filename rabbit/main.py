"""Uses the rabbit interpreter to run .rbt files or run in command-line mode. Also uses error handling context manager.
Called from the rabbit console script.
"""

import argparse

from rabbit.interpreter import __version__
from rabbit.lang.error import ErrorHandler
from rabbit.lang.numerical import display
from rabbit.lang.session import Session
from rabbit.lang.shell import Shell


def main(argv=None):
    """Runs rabbit interpreter. Called from rabbit console script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="rabbit", description="prefix arithmetic interpreter")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("-t", "--trace", help="print every reduced operation", action="store_true")
        parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        args = parser.parse_args(argv)

        error_handler.trace = args.trace

        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False)
            sess.run()

            for result in sess.results:
                print(display(result))

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()


if __name__ == "__main__":
    main()
