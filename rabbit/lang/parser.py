"""Recursive-descent parser for the rabbit language: converts a list of Tokens into a Program.

Formally, rabbit can be defined as

```
<program>    ::= <operation>*
<expression> ::= <integer>
               | <operation>
<operation>  ::= "(" <operator> <expression>+ ")"   ; at least one argument, any operator
```

Note that a bare <integer> cannot stand alone at the top level: every statement must be an operation. The parser is
single-pass with one token of lookahead and never backtracks.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from rabbit.lang.error import ParseError
from rabbit.lang.numerical import number
from rabbit.lang.scanner import Operator, TokenKind


END_OF_INPUT = "end of input"


@dataclass(frozen=True)
class IntegerLiteral:
    value: int
    line: Optional[int] = field(default=None, compare=False)
    column: Optional[int] = field(default=None, compare=False)

    def display(self, indents=0):
        return f"{'    ' * indents}IntegerLiteral({self.value})"

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Operation:
    """An operator applied to one or more arguments. line and column locate the operator in the source."""
    operator: Operator
    arguments: Tuple["Expression", ...]
    line: Optional[int] = field(default=None, compare=False)
    column: Optional[int] = field(default=None, compare=False)

    def display(self, indents=0):
        """Recursively displays Operation tree with readable format.

        Format:
        Operation('<operator>', arguments=[
            IntegerLiteral(<value>),
            Operation('<operator>', arguments=[
                ...
            ])
        ])
        """
        result = f"{'    ' * indents}Operation('{self.operator}', arguments=["
        for argument in self.arguments:
            result += "\n" + argument.display(indents + 1) + ","
        return result[:-1] + f"\n{'    ' * indents}])"

    def __str__(self):
        return f"({self.operator} {' '.join(str(argument) for argument in self.arguments)})"


Expression = Union[IntegerLiteral, Operation]


@dataclass(frozen=True)
class Program:
    body: Tuple[Operation, ...] = ()

    def display(self):
        return "\n".join(statement.display() for statement in self.body)

    def __iter__(self):
        return iter(self.body)

    def __len__(self):
        return len(self.body)


class Parser:
    """Owns a token sequence and a cursor into it. Use parse() rather than instantiating directly."""
    MAX_DEPTH = 200  # nested operations; parse and evaluate both recurse once per level

    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.idx = 0
        self.depth = 0

    @property
    def token(self):
        """Current token, or None if the token stream is exhausted."""
        return self.tokens[self.idx] if self.idx < len(self.tokens) else None

    def advance(self):
        token = self.token
        self.idx += 1
        return token

    def fail(self, expected):
        """Raises ParseError at the current token. At end of input, points just past the last token."""
        token = self.token
        if token is not None:
            raise ParseError(expected, token.text, token.line, token.column, token.end)

        if self.tokens:
            last = self.tokens[-1]
            line, column = last.line, last.end
        else:
            line, column = 1, 1
        raise ParseError(expected, END_OF_INPUT, line, column, column + 1)

    def parse_expression(self):
        token = self.token
        if token is None:
            self.fail("an expression")

        if token.kind is TokenKind.INTEGER_LITERAL:
            self.advance()
            return IntegerLiteral(number(token.value), token.line, token.column)

        if token.kind is TokenKind.LPAREN:
            if self.depth >= Parser.MAX_DEPTH:
                self.fail(f"at most {Parser.MAX_DEPTH} nested operations")

            self.depth += 1
            self.advance()
            operation = self.parse_operation()
            self.depth -= 1
            return operation

        self.fail("an integer or '('")

    def parse_operation(self):
        """Parses the remainder of an operation, after its opening '('."""
        token = self.token
        if token is None or token.kind is not TokenKind.OPERATOR:
            self.fail(f"an operator ({', '.join(Operator.symbols())})")
        operator = Operator(self.advance().value)

        arguments = []
        while True:
            if self.token is None:
                self.fail("')'")
            elif self.token.kind is TokenKind.RPAREN:
                break
            arguments.append(self.parse_expression())

        if not arguments:
            self.fail("at least one argument")
        self.advance()  # closing ')'

        return Operation(operator, tuple(arguments), token.line, token.column)

    def parse_program(self):
        body = []
        while self.token is not None:
            if self.token.kind is not TokenKind.LPAREN:
                self.fail("'(' to start a statement")
            body.append(self.parse_expression())
        return Program(tuple(body))


def parse(tokens):
    """Returns Program given tokens. Raises ParseError if tokens are not valid rabbit grammar."""
    return Parser(tokens).parse_program()
