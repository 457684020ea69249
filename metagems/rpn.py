"""Parsing and evaluating formulas in reverse Polish notation."""

from __future__ import annotations

import enum
import math
import operator
import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence

__all__ = [
    "Kind",
    "Node",
    "RPNError",
    "find_token_kind",
    "parse",
    "evaluate",
    "eval_rpn",
    "main",
]


class Kind(enum.Enum):
    """The kind of a token in a formula."""

    VAR = "var"  # a variable or number
    OP = "op"  # + - * /
    F1 = "f1"  # unary function
    F2 = "f2"  # binary function


class RPNError(ValueError):
    """A formula is malformed or cannot be evaluated."""


_OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

_UNARY: Dict[str, Callable[[float], float]] = {
    "abs": abs,
    "exp": math.exp,
    "log": math.log,
    "sqrt": math.sqrt,
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
}

_BINARY: Dict[str, Callable[[float, float], float]] = {
    "atan2": math.atan2,
    "pow": math.pow,
}

DEFAULT_FORMULA = "z 1 x / sin y * ^"


@dataclass
class Node:
    """A node of a parsed formula; ``a`` and ``b`` are its operands."""

    kind: Kind
    text: str
    a: Optional["Node"] = None
    b: Optional["Node"] = None


def find_token_kind(text: str) -> Kind:
    """Return the kind of a token; anything unknown is a variable."""
    if text in _OPERATORS:
        return Kind.OP
    if text in _UNARY:
        return Kind.F1
    if text in _BINARY:
        return Kind.F2
    return Kind.VAR


def parse(text: str) -> Node:
    """Parse a whitespace-separated formula into a tree; ``^`` means pow."""
    stack: List[Node] = []
    for token in text.split():
        if token == "^":
            token = "pow"
        kind = find_token_kind(token)
        node = Node(kind, token)
        if kind is Kind.F1:
            if not stack:
                raise RPNError("RPN formula is invalid")
            node.a = stack.pop()
        elif kind in (Kind.OP, Kind.F2):
            if len(stack) < 2:
                raise RPNError("RPN formula is invalid")
            node.b = stack.pop()
            node.a = stack.pop()
        stack.append(node)

    if len(stack) != 1:
        raise RPNError("RPN formula is invalid")
    return stack[0]


def _value(text: str, variables: Mapping[str, float]) -> float:
    if text in variables:
        return variables[text]
    try:
        return float(text)
    except ValueError:
        raise RPNError(f"unknown variable {text!r}") from None


def evaluate(node: Node, variables: Optional[Mapping[str, float]] = None) -> float:
    """Evaluate a parsed formula with the given variable values."""
    env: Mapping[str, float] = variables or {}
    if node.kind is Kind.VAR:
        return _value(node.text, env)
    if node.kind is Kind.F1:
        if node.a is None:
            raise RPNError(f"{node.text} is missing its operand")
        return _UNARY[node.text](evaluate(node.a, env))
    if node.a is None or node.b is None:
        raise RPNError(f"{node.text} is missing an operand")
    table = _OPERATORS if node.kind is Kind.OP else _BINARY
    return table[node.text](evaluate(node.a, env), evaluate(node.b, env))


def eval_rpn(text: str, variables: Optional[Mapping[str, float]] = None) -> float:
    """Parse and evaluate a formula in one step."""
    return evaluate(parse(text), variables)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Evaluate a formula given as ``formula name=value ...``.

    With no arguments, evaluates the default formula at x=.3, y=.6, z=.9.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        formula = DEFAULT_FORMULA
        variables: Dict[str, float] = {"x": 0.3, "y": 0.6, "z": 0.9}
    else:
        formula = args[0]
        variables = {}
        for item in args[1:]:
            name, sep, value = item.partition("=")
            if not sep or not name:
                print(f"expected name=value, got {item!r}", file=sys.stderr)
                return 1
            try:
                variables[name] = float(value)
            except ValueError:
                print(f"invalid number {value!r}", file=sys.stderr)
                return 1
    try:
        result = eval_rpn(formula, variables)
    except (RPNError, ValueError, ZeroDivisionError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"{result:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())