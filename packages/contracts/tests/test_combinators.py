"""Tests for the logical combinators."""

import pytest

from dataknobs_contracts import (
    And,
    Any,
    MalformedContractError,
    Maybe,
    Nat,
    Neg,
    Not,
    Nothing,
    Num,
    Or,
    Pos,
    Xor,
    describe,
    evaluate,
    is_valid,
)


class TestOr:
    """Test disjunction."""

    def test_any_child_accepts(self):
        """Test that one accepting child is enough."""
        contract = Or(int, str)
        assert is_valid(1, contract)
        assert is_valid("a", contract)
        assert not is_valid(1.5, contract)

    def test_short_circuits_in_order(self, accepting_recorder, rejecting_recorder):
        """Test that evaluation stops at the first accepting child."""
        assert is_valid(5, Or(rejecting_recorder, Any, accepting_recorder))
        assert rejecting_recorder.calls == [5]
        assert accepting_recorder.calls == []

    def test_idempotent(self, sample_values):
        """Test that Or(A, A) behaves like A."""
        for contract in (Num, Nat, str, None):
            for value in sample_values:
                assert is_valid(value, Or(contract, contract)) == is_valid(value, contract)

    def test_failure_reports_whole_combinator(self):
        """Test that the failing contract is the Or itself."""
        contract = Or(int, str)
        passed, failing = evaluate(1.5, contract)
        assert not passed
        assert failing is contract

    def test_description(self):
        """Test the connective goes before the last child."""
        assert describe(Or(int, float)) == "int or float"
        assert describe(Or(int, float, str)) == "int, float or str"
        assert describe(Or(Num)) == "Num"


class TestXor:
    """Test exclusive-or."""

    def test_exactly_one_child_accepts(self):
        """Test that Xor needs exactly one acceptance."""
        assert not is_valid(5, Xor(Pos, Nat))
        assert not is_valid(-3, Xor(Pos, Nat))
        assert is_valid(-3, Xor(Pos, Neg))
        assert is_valid(3, Xor(Pos, Neg))
        assert not is_valid(0, Xor(Pos, Neg))

    def test_evaluates_every_child(self, accepting_recorder, rejecting_recorder):
        """Test that Xor does not short-circuit."""
        assert not is_valid("v", Xor(accepting_recorder, Any, rejecting_recorder))
        assert accepting_recorder.calls == ["v"]
        assert rejecting_recorder.calls == ["v"]

    def test_order_does_not_matter(self, sample_values):
        """Test that only the count of acceptances decides."""
        for value in sample_values:
            assert is_valid(value, Xor(Num, str, Nat)) == is_valid(value, Xor(Nat, Num, str))

    def test_description(self):
        """Test the canonical description."""
        assert describe(Xor(Pos, Neg)) == "Pos xor Neg"


class TestAnd:
    """Test conjunction."""

    def test_every_child_accepts(self):
        """Test that all children must accept."""
        contract = And(Num, Pos)
        assert is_valid(3, contract)
        assert not is_valid(-3, contract)
        assert not is_valid("3", contract)

    def test_short_circuits(self, accepting_recorder):
        """Test that evaluation stops at the first rejection."""
        assert not is_valid(1, And(Nothing, accepting_recorder))
        assert accepting_recorder.calls == []

    def test_idempotent(self, sample_values):
        """Test that And(A, A) behaves like A."""
        for contract in (Num, Nat, str, None):
            for value in sample_values:
                assert is_valid(value, And(contract, contract)) == is_valid(value, contract)

    def test_description(self):
        """Test the canonical description."""
        assert describe(And(Nat, Pos)) == "Nat and Pos"


class TestNot:
    """Test negation."""

    def test_negates_single_contract(self, sample_values):
        """Test that Not(A) accepts exactly what A rejects."""
        for contract in (Num, str, None, Any, Nothing):
            for value in sample_values:
                assert is_valid(value, Not(contract)) != is_valid(value, contract)

    def test_every_child_must_reject(self):
        """Test that any accepting child makes Not fail."""
        contract = Not(None, str)
        assert is_valid(5, contract)
        assert not is_valid(None, contract)
        assert not is_valid("x", contract)

    def test_description(self):
        """Test the canonical description."""
        assert describe(Not(None, str)) == "a value that is none of [None, str]"


class TestMaybe:
    """Test optional contracts."""

    def test_accepts_value_or_none(self):
        """Test that Maybe adds an absent branch."""
        contract = Maybe(Num)
        assert is_valid(5, contract)
        assert is_valid(None, contract)
        assert not is_valid("x", contract)

    def test_is_an_or_with_none(self):
        """Test that Maybe is Or with a trailing None."""
        contract = Maybe(Num, str)
        assert isinstance(contract, Or)
        assert contract.contracts == (Num, str, None)

    def test_description(self):
        """Test the canonical description."""
        assert describe(Maybe(Num)) == "Num or None"

    def test_requires_a_contract(self):
        """Test that an empty Maybe is malformed."""
        with pytest.raises(MalformedContractError):
            Maybe()


class TestConstruction:
    """Test construction rules shared by combinators."""

    @pytest.mark.parametrize("combinator", [Or, Xor, And, Not])
    def test_empty_children_fail_fast(self, combinator):
        """Test that zero children is rejected at construction."""
        with pytest.raises(MalformedContractError):
            combinator()

    def test_bracket_shorthand(self):
        """Test that Name[a, b] is Name(a, b)."""
        contract = Or[int, str]
        assert isinstance(contract, Or)
        assert contract.contracts == (int, str)
        assert And[Num].contracts == (Num,)

    def test_immutable(self):
        """Test that contracts cannot be changed after construction."""
        contract = Or(int, str)
        with pytest.raises(AttributeError):
            contract._contracts = (float,)
        with pytest.raises(AttributeError):
            Num.name = "Other"

    def test_nested_combinators(self):
        """Test that combinators recurse through each other."""
        contract = Or(And(Num, Pos), Not(Num))
        assert is_valid(5, contract)
        assert is_valid("x", contract)
        assert not is_valid(-5, contract)


class TestOperators:
    """Test |, & and ~ sugar."""

    def test_or_operator(self):
        """Test that | builds a flat Or."""
        contract = Num | str | None
        assert type(contract) is Or
        assert contract.contracts == (Num, str, None)

    def test_reflected_or(self):
        """Test that a class on the left still builds an Or."""
        contract = int | Nat
        assert type(contract) is Or
        assert contract.contracts == (int, Nat)

    def test_and_operator(self):
        """Test that & builds a flat And."""
        contract = Num & Pos & Nat
        assert type(contract) is And
        assert contract.contracts == (Num, Pos, Nat)
        assert is_valid(3, contract)
        assert not is_valid(0, contract)

    def test_invert_operator(self):
        """Test that ~ builds a Not."""
        contract = ~Num
        assert type(contract) is Not
        assert is_valid("x", contract)
        assert not is_valid(1, contract)

    def test_maybe_is_not_flattened(self):
        """Test that a Maybe keeps its own shape when combined."""
        contract = Maybe(Num) | str
        assert contract.contracts[1] is str
        assert isinstance(contract.contracts[0], Maybe)
