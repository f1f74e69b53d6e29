import unittest

from rabbit.lang.error import LexicalError
from rabbit.lang.scanner import Operator, Token, TokenKind, scan


class ScanTestCase(unittest.TestCase):

    def test_integer_literal(self):
        for case in ["0", "7", "42", "007", "123456789012345678901234567890"]:
            tokens = scan(case)
            self.assertEqual([Token(TokenKind.INTEGER_LITERAL, 1, 1, case)], tokens, case)

    def test_operation(self):
        expected = [
            Token(TokenKind.LPAREN, 1, 1),
            Token(TokenKind.OPERATOR, 1, 2, "+"),
            Token(TokenKind.INTEGER_LITERAL, 1, 4, "1"),
            Token(TokenKind.INTEGER_LITERAL, 1, 6, "2"),
            Token(TokenKind.RPAREN, 1, 7),
        ]
        self.assertEqual(expected, scan("(+ 1 2)"))

    def test_operators(self):
        for symbol in Operator.symbols():
            self.assertEqual([Token(TokenKind.OPERATOR, 1, 1, symbol)], scan(symbol), symbol)

    def test_minus_is_never_part_of_a_literal(self):
        self.assertEqual(
            [Token(TokenKind.OPERATOR, 1, 1, "-"), Token(TokenKind.INTEGER_LITERAL, 1, 2, "5")],
            scan("-5")
        )

    def test_whitespace(self):
        self.assertEqual([], scan(""))
        self.assertEqual([], scan(" \t \n  \r"))
        self.assertEqual([Token(TokenKind.INTEGER_LITERAL, 1, 4, "12")], scan("\t  12  "))

    def test_multi_line(self):
        tokens = scan("(+ 1 1)\n  (- 2 1)")
        self.assertEqual(10, len(tokens))
        self.assertEqual((1, 1), (tokens[0].line, tokens[0].column))
        self.assertEqual((2, 3), (tokens[5].line, tokens[5].column))
        self.assertEqual((2, 6), (tokens[7].line, tokens[7].column))

    def test_positions_are_monotonic_within_a_line(self):
        tokens = scan("(* 10 (+ 200 3) 4)")
        columns = [token.column for token in tokens]
        self.assertEqual(sorted(columns), columns)

    def test_should_raise(self):
        cases = {
            "(+ 1 @)": (1, 6, "@)"),
            "abc": (1, 1, "abc"),
            "(+ 1.5 2)": (1, 5, ".5"),
            "(+ 1 2)\n(% 1 2)": (2, 2, "%"),
            "1 x2 3": (1, 3, "x2"),
        }
        for case, (line, column, text) in cases.items():
            with self.assertRaises(LexicalError, msg=case) as context:
                scan(case)
            self.assertEqual((line, column, text), (context.exception.line, context.exception.column,
                                                    context.exception.expr), case)

    def test_token_text(self):
        open_paren, operator, literal = scan("(+ 15")
        self.assertEqual("(", open_paren.text)
        self.assertEqual("+", operator.text)
        self.assertEqual(6, literal.end)


if __name__ == '__main__':
    unittest.main()
