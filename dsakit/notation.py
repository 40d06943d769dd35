"""Conversions between prefix, infix and postfix expression notation.

Operands are single ASCII letters or digits; every other character is a
binary operator. Results of the ``*_to_infix`` conversions are fully
parenthesised.
"""

from __future__ import annotations

import string

_OPERANDS = frozenset(string.ascii_letters + string.digits)

_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


def precedence(operator: str) -> int:
    """Binding strength of an operator; -1 for anything that is not one."""
    return _PRECEDENCE.get(operator, -1)


def _finish(stack: list[str]) -> str:
    if len(stack) != 1:
        raise ValueError("malformed expression")
    return stack[0]


def postfix_to_infix(expression: str) -> str:
    """Convert a postfix expression such as ``ab+`` into infix."""
    stack: list[str] = []
    for ch in expression:
        if ch in _OPERANDS:
            stack.append(ch)
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {ch!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(f"({left}{ch}{right})")
    return _finish(stack)


def prefix_to_infix(expression: str) -> str:
    """Convert a prefix expression such as ``+ab`` into infix."""
    stack: list[str] = []
    for ch in reversed(expression):
        if ch in _OPERANDS:
            stack.append(ch)
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {ch!r} lacks operands")
        left = stack.pop()
        right = stack.pop()
        stack.append(f"({left}{ch}{right})")
    return _finish(stack)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression with parentheses into prefix notation."""
    output: list[str] = []
    stack: list[str] = []
    for ch in reversed(expression):
        if ch in _OPERANDS:
            output.append(ch)
        elif ch == ")":
            stack.append(ch)
        elif ch == "(":
            while stack and stack[-1] != ")":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
        else:
            if ch == "^":
                while stack and precedence(ch) <= precedence(stack[-1]):
                    output.append(stack.pop())
            else:
                while stack and precedence(ch) < precedence(stack[-1]):
                    output.append(stack.pop())
            stack.append(ch)
    while stack:
        top = stack.pop()
        if top == ")":
            raise ValueError("unbalanced parentheses")
        output.append(top)
    return "".join(reversed(output))