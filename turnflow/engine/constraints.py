"""
Constraint Evaluator - Decides whether an action's constraints hold.

Semantics:
- The constraint field is resolved through the context's lookup()
- A missing value (None) fails the constraint
- Number constraints default to a threshold: context value >= constraint value
- Boolean and string constraints default to equality
- An explicit operator (==, !=, <, <=, >, >=) overrides the default
- Ordering operators need two numbers, or two strings; mixed types fail
- Booleans are never treated as numbers

The evaluator is stateless. Swap in another one (any object with
evaluate_all) to change the policy without touching the engine.
"""

from __future__ import annotations
import logging
from typing import Any, Iterable

from ..rules.ruleset import ComparisonOp, Constraint, is_number
from .context import ContextLookup

logger = logging.getLogger(__name__)


class ConstraintEvaluator:
    """
    Evaluates constraints against a context.

    Examples (context: {"figures": 3, "has_card": True, "owner": "red"}):
    - Constraint("figures", 2)                        -> True (3 >= 2)
    - Constraint("figures", 4)                        -> False
    - Constraint("figures", 3, op=ComparisonOp.GT)    -> False
    - Constraint("has_card", True)                    -> True
    - Constraint("owner", "blue")                     -> False
    - Constraint("missing", 0)                        -> False
    """

    def evaluate(self, constraint: Constraint, context: ContextLookup) -> bool:
        """Evaluate a single constraint."""
        actual = context.lookup(constraint.field)
        if actual is None:
            logger.debug("Constraint field '%s' not in context", constraint.field)
            return False

        expected = constraint.value
        if not _same_kind(actual, expected):
            logger.debug(
                "Constraint field '%s' has %s, expected %s",
                constraint.field,
                type(actual).__name__,
                type(expected).__name__,
            )
            return False

        return _compare(actual, expected, constraint.operator)

    def evaluate_all(
        self, constraints: Iterable[Constraint], context: ContextLookup
    ) -> bool:
        """True iff every constraint holds (an empty list holds)."""
        return all(self.evaluate(c, context) for c in constraints)


def _same_kind(actual: Any, expected: Any) -> bool:
    """Values comparable under the closed number/boolean/string variant."""
    if isinstance(expected, bool):
        return isinstance(actual, bool)
    if is_number(expected):
        return is_number(actual)
    if isinstance(expected, str):
        return isinstance(actual, str)
    return False


def _compare(left: Any, right: Any, op: ComparisonOp) -> bool:
    """Perform comparison operation."""
    try:
        if op == ComparisonOp.EQ:
            return left == right
        elif op == ComparisonOp.NE:
            return left != right
        elif op == ComparisonOp.LT:
            return left < right
        elif op == ComparisonOp.GT:
            return left > right
        elif op == ComparisonOp.LE:
            return left <= right
        elif op == ComparisonOp.GE:
            return left >= right
    except TypeError:
        return False
    return False
