"""Property-based tests for the greeting and arithmetic services.

Uses hypothesis to check that ``greet`` and ``add`` hold their
contracts for generated inputs, not just hand-picked examples.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from app.hello.services import ArithmeticService, GreetingService

greeting = GreetingService()
arithmetic = ArithmeticService()

int32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@given(name=st.text(alphabet=" \t\n\r\x0b\x0c"))
def test_greet_blank_names_always_greet_world(name: str) -> None:
    assert greeting.greet(name) == "Hello, World!"


@given(name=st.text().filter(lambda s: s.strip()))
@settings(max_examples=200)
def test_greet_non_blank_names_are_trimmed(name: str) -> None:
    assert greeting.greet(name) == f"Hello, {name.strip()}!"


@given(a=int32, b=int32)
def test_add_is_commutative(a: int, b: int) -> None:
    assert arithmetic.add(a, b) == arithmetic.add(b, a)


@given(a=int32, b=int32)
def test_add_stays_within_int32(a: int, b: int) -> None:
    assert -(2**31) <= arithmetic.add(a, b) <= 2**31 - 1


@given(
    a=st.integers(min_value=-(2**30), max_value=2**30 - 1),
    b=st.integers(min_value=-(2**30), max_value=2**30 - 1),
)
def test_add_minus_first_operand_gives_second(a: int, b: int) -> None:
    """Without overflow, subtracting ``a`` from the sum recovers ``b``."""
    assert arithmetic.add(a, b) - a == b
