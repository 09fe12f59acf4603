"""Recursive descent parser for media query conditions.

Parses condition strings into Condition dataclasses from
mediaquery.types.conditions. Operators, loosest to tightest:

    condition = comma_or
    comma_or  = keyword_or (',' keyword_or)*     (HarmonyOS-style OR)
    keyword_or = and_expr ('or' and_expr)*
    and_expr  = not_expr ('and' not_expr)*
    not_expr  = 'not' condition | feature
    feature   = '(' condition ')' | NAME OP VALUE
    NAME      = [a-z-]+
    OP        = [><=:]+

Chains of one operator are split on every top-level occurrence and nest
to the right. A leading 'not ' applies to the whole remaining text.

Parsing never raises: malformed input returns None so that callers can
treat it as a condition that never matches.

Range syntax ("600vp <= width < 840vp") is recognized but not supported;
it parses to None. Write it as "(width >= 600vp) and (width < 840vp)".
"""

from __future__ import annotations

import logging
import re

from mediaquery.types.conditions import (
    AndCondition,
    Condition,
    FeatureCondition,
    NotCondition,
    OrCondition,
)

logger = logging.getLogger(__name__)

_NOT_PREFIX = "not "

# Binary operators in the order they are tried (loosest first)
_COMMA = ","
_OR = " or "
_AND = " and "

# Parenthesis groups and 'not ' prefixes; flat chains do not count
_MAX_DEPTH = 256

_FEATURE_RE = re.compile(r"^([a-z-]+)\s*([><=:]+)\s*(.+)$", re.DOTALL)

# "min <op> feature <op> max" with < or <= on either side
_RANGE_VALUE = r"\d+(?:\.\d+)?[a-z]*"
_RANGE_RE = re.compile(
    rf"^({_RANGE_VALUE})\s*(<=?)\s*([a-z-]+)\s*(<=?)\s*({_RANGE_VALUE})$"
)


def parse_condition(text: str) -> Condition | None:
    """Parse a media query condition string into a Condition.

    Args:
        text: The condition string, e.g. "(width >= 600vp) and (dark-mode: true)".

    Returns:
        A Condition dataclass instance, or None if the text cannot be parsed.

    Example:
        >>> parse_condition("(width >= 600vp)")
        FeatureCondition(name='width', operator='>=', value='600vp')
    """
    if not is_balanced_parens(text):
        logger.debug(
            "Unbalanced parentheses in media condition: %r",
            text,
            extra={"condition": text, "reason": "unbalanced_parens"},
        )
        return None

    result = _parse(text, 0)
    if result is None:
        logger.debug(
            "Could not parse media condition: %r",
            text,
            extra={"condition": text, "reason": "syntax"},
        )
    return result


def _parse(text: str, depth: int) -> Condition | None:
    """Parse one (sub)expression. Returns None on any failure."""
    if depth > _MAX_DEPTH:
        logger.debug(
            "Media condition nesting exceeds maximum depth of %d",
            _MAX_DEPTH,
            extra={"condition": text, "reason": "max_depth"},
        )
        return None

    text = text.strip()
    if not text:
        return None

    if has_matching_outer_parens(text):
        return _parse(text[1:-1], depth + 1)

    if text.startswith(_NOT_PREFIX):
        inner = _parse(text[len(_NOT_PREFIX) :], depth + 1)
        if inner is None:
            return None
        return NotCondition(inner=inner)

    for operator, node_type in (
        (_COMMA, OrCondition),
        (_OR, OrCondition),
        (_AND, AndCondition),
    ):
        parts = _split_top_level(text, operator)
        if len(parts) == 1:
            continue

        operands: list[Condition] = []
        for part in parts:
            operand = _parse(part, depth)
            if operand is None:
                return None
            operands.append(operand)

        # Fold right: a and b and c -> And(a, And(b, c))
        result = operands[-1]
        for operand in reversed(operands[:-1]):
            result = node_type(left=operand, right=result)
        return result

    return _parse_feature(text)


def _split_top_level(text: str, operator: str) -> list[str]:
    """Split text on every top-level occurrence of operator.

    An operand starting with 'not ' keeps the rest of the chain, so
    "a and not b and c" splits into ["a", "not b and c"].
    """
    parts: list[str] = []
    index = find_top_level_operator(text, operator)
    while index != -1:
        part = text[:index]
        if parts and part.strip().startswith(_NOT_PREFIX):
            break
        parts.append(part)
        text = text[index + len(operator) :]
        index = find_top_level_operator(text, operator)
    parts.append(text)
    return parts


def _parse_feature(text: str) -> FeatureCondition | None:
    """Parse a single "name operator value" feature."""
    if is_range_query(text):
        logger.debug(
            "Range media queries are not supported: %r",
            text,
            extra={"condition": text, "reason": "range_query"},
        )
        return None

    match = _FEATURE_RE.match(text)
    if match is None:
        return None

    name, operator, value = match.groups()
    return FeatureCondition(name=name, operator=operator, value=value.strip())


def find_top_level_operator(text: str, operator: str) -> int:
    """Find the first occurrence of operator outside any parentheses.

    Args:
        text: Text to search in.
        operator: Operator to find (e.g. ",", " or ", " and ").

    Returns:
        Index of the operator, or -1 if not found at depth 0.
    """
    depth = 0
    for index in range(len(text) - len(operator) + 1):
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if depth == 0 and text.startswith(operator, index):
            return index
    return -1


def is_balanced_parens(text: str) -> bool:
    """Check that every '(' has a matching ')' and none closes early."""
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def has_matching_outer_parens(text: str) -> bool:
    """Check whether the first '(' and the last ')' are the same pair.

    Balanced parentheses are not enough:

    - "(a) and (b)"   -> False (the first group closes before the end)
    - "((a) and (b))" -> True
    """
    if not text.startswith("(") or not text.endswith(")"):
        return False

    depth = 0
    last = len(text) - 1
    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if depth == 0 and index < last:
            return False
    return depth == 0


def is_range_query(text: str) -> bool:
    """Detect range syntax such as "600vp <= width < 840vp"."""
    return _RANGE_RE.match(text) is not None
