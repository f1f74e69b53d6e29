"""rabbit: an interpreter for a tiny prefix arithmetic language, e.g. `(+ 1 (* 5 3))`.

Basic program flow (each stage fully consumes the previous stage's output):
    1. Scanner: converts source text into tokens, line by line (see rabbit/lang/scanner.py)
    2. Parser: recursive descent over the tokens, producing a Program of Operation trees (see rabbit/lang/parser.py)
    3. Evaluator: walks each tree and reduces it to a number (see rabbit/lang/evaluator.py)

Any stage raises a RabbitError subclass on failure, aborting the remaining stages. Nothing is shared between calls,
so interpret is safe to repeat.
"""

from rabbit.lang.evaluator import evaluate
from rabbit.lang.parser import parse
from rabbit.lang.scanner import scan


__version__ = "0.1.0"


def interpret(text, trace=None):
    """Returns the value of each top-level statement in text."""
    return evaluate(parse(scan(text)), trace)
