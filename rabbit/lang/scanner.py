"""Lexical analysis for the rabbit language: converts source text into a list of Tokens.

All tokens can be loosely defined as follows:

```
<lparen>   ::= "("
<rparen>   ::= ")"
<operator> ::= "+" | "-" | "*" | "/"
<integer>  ::= <digit>+                 ; "-" is never part of a literal: negatives are written (- 0 5)
```

Whitespace separates tokens but is otherwise ignored. Any other character is a LexicalError.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rabbit.lang.error import LexicalError
from rabbit.lang.numerical import is_digit


class TokenKind(Enum):
    LPAREN = "("
    RPAREN = ")"
    OPERATOR = "OP"
    INTEGER_LITERAL = "INT"


class Operator(Enum):
    """The closed set of primitive operators."""
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDES = "/"

    @classmethod
    def symbols(cls):
        return [operator.value for operator in cls]

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Token:
    """Smallest lexical unit. line and column are 1-based and point at the token's first character."""
    kind: TokenKind
    line: int
    column: int
    value: Optional[str] = None

    @property
    def text(self):
        """Source text of this token."""
        return self.value if self.value is not None else self.kind.value

    @property
    def end(self):
        """Column just past this token."""
        return self.column + len(self.text)

    def __str__(self):
        return f"{self.kind.name}('{self.text}') at {self.line}:{self.column}"


def scan_line(line, line_num):
    """Returns the tokens of a single line. line_num is 1-based."""
    tokens = []
    idx = 0

    while idx < len(line):
        char = line[idx]

        if char == "(":
            tokens.append(Token(TokenKind.LPAREN, line_num, idx + 1))
            idx += 1

        elif char == ")":
            tokens.append(Token(TokenKind.RPAREN, line_num, idx + 1))
            idx += 1

        elif char in Operator.symbols():
            tokens.append(Token(TokenKind.OPERATOR, line_num, idx + 1, char))
            idx += 1

        elif is_digit(char):
            start = idx
            while idx < len(line) and is_digit(line[idx]):
                idx += 1
            tokens.append(Token(TokenKind.INTEGER_LITERAL, line_num, start + 1, line[start:idx]))

        elif char.isspace():
            idx += 1

        else:
            # report the whole unrecognized run, up to the next whitespace
            start = idx
            while idx < len(line) and not line[idx].isspace():
                idx += 1
            raise LexicalError(line[start:idx], line_num, start + 1)

    return tokens


def scan(text):
    """Eagerly tokenizes text, line by line. Raises LexicalError on the first unrecognized run of characters."""
    tokens = []
    for idx, line in enumerate(text.split("\n")):
        tokens.extend(scan_line(line, idx + 1))
    return tokens
