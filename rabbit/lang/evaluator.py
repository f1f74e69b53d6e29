"""Tree-walking evaluator for the rabbit language. Evaluation is a post-order walk of each statement in a Program:
arguments are reduced left to right before their operation combines them. The tree is never mutated.
"""

from functools import reduce
import operator as ops

from rabbit.lang.error import EvaluationError
from rabbit.lang.numerical import divide, normalize
from rabbit.lang.parser import IntegerLiteral, Operation
from rabbit.lang.scanner import Operator


def combine(node, values):
    """Combines already evaluated argument values according to node.operator."""
    if not values:
        # unreachable from parse(), which requires at least one argument
        raise EvaluationError("'{}' expects at least one argument", str(node.operator), node.line, node.column)

    if node.operator is Operator.PLUS:
        return sum(values)
    elif node.operator is Operator.TIMES:
        return reduce(ops.mul, values, 1)
    elif node.operator is Operator.MINUS:
        return reduce(ops.sub, values)  # left fold: (- 10) is 10, not -10
    elif node.operator is Operator.DIVIDES:
        return reduce(lambda dividend, divisor: divide(dividend, divisor, node), values)

    raise EvaluationError("invalid operator '{}'", str(node.operator), node.line, node.column, internal=True)


def traverse(node, trace=None):
    """Returns the value of node. trace, if given, is called as trace(node, value) after each Operation is reduced."""
    if isinstance(node, IntegerLiteral):
        return node.value

    if isinstance(node, Operation):
        value = normalize(combine(node, [traverse(argument, trace) for argument in node.arguments]))
        if trace is not None:
            trace(node, value)
        return value

    raise EvaluationError("invalid node type '{}'", type(node).__name__, internal=True)


def evaluate(program, trace=None):
    """Returns a list with the value of each top-level statement in program, in order."""
    return [traverse(statement, trace) for statement in program]
