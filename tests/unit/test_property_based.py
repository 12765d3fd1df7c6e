"""
Property-based tests using Hypothesis.

These tests verify invariants across a wide range of inputs,
replacing the need for exhaustive example-based tests.
"""

from __future__ import annotations

import math

from hypothesis import given, settings
from hypothesis import strategies as st

from floatcalc.core.calculator import evaluate_line
from floatcalc.core.expression_lang.numeric import parse_float32, to_float32

# A generated tree is either a literal lexeme or an (op, left, right) tuple.
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}

_literals = st.one_of(
    st.integers(min_value=0, max_value=10**6).map(str),
    st.tuples(
        st.integers(min_value=0, max_value=9999),
        st.integers(min_value=0, max_value=999),
    ).map(lambda p: f"{p[0]}.{p[1]}"),
)

_trees = st.recursive(
    _literals,
    lambda children: st.tuples(st.sampled_from(sorted(_PRECEDENCE)), children, children),
    max_leaves=25,
)


def _precedence(tree: str | tuple) -> int:
    return 3 if isinstance(tree, str) else _PRECEDENCE[tree[0]]


def _render(tree: str | tuple, spaced: bool) -> str:
    """Render with the fewest parentheses that keep the tree's shape."""
    if isinstance(tree, str):
        return tree
    op, left, right = tree
    left_text = _render(left, spaced)
    right_text = _render(right, spaced)
    if _precedence(left) < _PRECEDENCE[op]:
        left_text = f"({left_text})"
    # Operators are left-associative, so an equal-precedence right child needs parentheses
    if _precedence(right) <= _PRECEDENCE[op]:
        right_text = f"({right_text})"
    sep = " " if spaced else ""
    return f"{left_text}{sep}{op}{sep}{right_text}"


def _reference(tree: str | tuple) -> float:
    """Evaluate the generated tree directly in single precision."""
    if isinstance(tree, str):
        return parse_float32(tree)
    op, left, right = tree
    a, b = _reference(left), _reference(right)
    if op == "+":
        return to_float32(a + b)
    if op == "-":
        return to_float32(a - b)
    if op == "*":
        return to_float32(a * b)
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return to_float32(a / b)


def _same(a: float, b: float) -> bool:
    return (math.isnan(a) and math.isnan(b)) or a == b


class TestEvaluationProperties:
    @given(_trees, st.booleans())
    @settings(max_examples=300)
    def test_matches_single_precision_reference(self, tree: str | tuple, spaced: bool) -> None:
        """Invariant: standard precedence and left associativity in float32."""
        result = evaluate_line(_render(tree, spaced))
        assert result.ok
        assert result.value is not None
        assert _same(result.value, _reference(tree))

    @given(_trees)
    @settings(max_examples=100)
    def test_evaluation_is_repeatable(self, tree: str | tuple) -> None:
        """Invariant: the same line always yields the same value."""
        source = _render(tree, True)
        first = evaluate_line(source)
        second = evaluate_line(source)
        assert first.value is not None and second.value is not None
        assert _same(first.value, second.value)

    @given(_trees)
    @settings(max_examples=100)
    def test_redundant_parentheses_do_not_change_value(self, tree: str | tuple) -> None:
        """Invariant: wrapping a whole expression in parentheses is a no-op."""
        source = _render(tree, False)
        plain = evaluate_line(source)
        wrapped = evaluate_line(f"(({source}))")
        assert plain.value is not None and wrapped.value is not None
        assert _same(plain.value, wrapped.value)


class TestDiagnosticProperties:
    @given(st.text(alphabet="0123456789.+-*/() \tax", max_size=40))
    @settings(max_examples=300)
    def test_never_crashes_on_arbitrary_input(self, source: str) -> None:
        """Invariant: every line yields a value or a diagnostic inside the line."""
        result = evaluate_line(source)
        if result.ok:
            assert result.value is not None
            return
        diagnostic = result.diagnostic
        assert diagnostic is not None
        assert diagnostic.source == source
        assert 0 <= diagnostic.offset <= len(source)

    @given(st.text(alphabet="abcxyz^%!", min_size=1, max_size=5), st.integers(0, 20))
    def test_invalid_character_offset(self, junk: str, width: int) -> None:
        """Invariant: the first bad character is reported at its own offset."""
        source = "1+" * width + junk
        result = evaluate_line(source)
        assert result.diagnostic is not None
        assert result.diagnostic.offset == 2 * width
        assert result.diagnostic.fragment == junk[0]
