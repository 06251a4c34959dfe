"""Unit tests for per-kind constraint checks."""

from recordcheck.checker import check_constraints, check_integer, check_sequence, check_text
from recordcheck.constraints import ConstraintSet, parse_rule
from recordcheck.errors import Violation, ViolationKind
from recordcheck.kinds import Kind


def _constraints(rule: str) -> ConstraintSet:
    violations: list[Violation] = []
    constraints = parse_rule(rule, "Field", violations)
    assert violations == []
    return constraints


def _kinds(violations: list[Violation]) -> list[ViolationKind]:
    return [violation.kind for violation in violations]


class TestCheckText:
    """Test text constraint checks."""

    def test_within_bounds(self):
        violations: list[Violation] = []
        check_text("abc", "Name", _constraints("min:3;max:5"), violations)
        assert violations == []

    def test_below_min(self):
        violations: list[Violation] = []
        check_text("ab", "Name", _constraints("min:3;max:5"), violations)
        assert _kinds(violations) == [ViolationKind.MIN]
        assert str(violations[0]) == "field: Name err: length can't be less than min"

    def test_above_max(self):
        violations: list[Violation] = []
        check_text("abcdef", "Name", _constraints("min:3;max:5"), violations)
        assert _kinds(violations) == [ViolationKind.MAX]

    def test_all_checks_evaluated(self):
        violations: list[Violation] = []
        check_text("abcdef", "Name", _constraints("in:x,y;len:2;max:5"), violations)
        assert _kinds(violations) == [ViolationKind.MAX, ViolationKind.LEN, ViolationKind.IN]

    def test_membership_is_exact(self):
        violations: list[Violation] = []
        check_text("Admin", "Role", _constraints("in:admin,user"), violations)
        assert _kinds(violations) == [ViolationKind.IN]

        violations = []
        check_text("user", "Role", _constraints("in:admin,user"), violations)
        assert violations == []

    def test_length_counts_characters(self):
        violations: list[Violation] = []
        check_text("héllo", "Name", _constraints("len:5"), violations)
        assert violations == []


class TestCheckInteger:
    """Test integer constraint checks."""

    def test_in_not_contained(self):
        violations: list[Violation] = []
        check_integer(5, "Code", _constraints("in:1,2,3"), violations)
        assert _kinds(violations) == [ViolationKind.IN]

    def test_in_contained(self):
        violations: list[Violation] = []
        check_integer(2, "Code", _constraints("in:1,2,3"), violations)
        assert violations == []

    def test_len_always_invalid(self):
        for value in (0, 3, 100):
            violations: list[Violation] = []
            check_integer(value, "Code", _constraints("len:3"), violations)
            assert _kinds(violations) == [ViolationKind.INVALID_SYNTAX]

    def test_bounds(self):
        violations: list[Violation] = []
        check_integer(-5, "Temp", _constraints("min:-1;max:10"), violations)
        assert _kinds(violations) == [ViolationKind.MIN]
        assert violations[0].message == "value can't be less than min"

        violations = []
        check_integer(11, "Temp", _constraints("min:-1;max:10"), violations)
        assert _kinds(violations) == [ViolationKind.MAX]

    def test_malformed_in_token_skipped(self):
        """A bad token is reported and never matches, even for zero."""
        violations: list[Violation] = []
        check_integer(0, "Code", _constraints("in:x,1"), violations)
        assert _kinds(violations) == [ViolationKind.INVALID_SYNTAX, ViolationKind.IN]

        violations = []
        check_integer(1, "Code", _constraints("in:x,1"), violations)
        assert _kinds(violations) == [ViolationKind.INVALID_SYNTAX]


class TestCheckSequence:
    """Test element-wise sequence checks."""

    def test_integer_elements(self):
        violations: list[Violation] = []
        check_sequence([5, 15, 3], Kind.SEQUENCE_OF_INT, "Scores", _constraints("max:10"), violations)
        assert len(violations) == 1
        assert violations[0].field == "Scores 1th element"
        assert violations[0].kind == ViolationKind.MAX

    def test_elements_checked_independently(self):
        violations: list[Violation] = []
        check_sequence(["a", "bbbb", "cccc"], Kind.SEQUENCE_OF_TEXT, "Tags", _constraints("max:3"), violations)
        assert [v.field for v in violations] == ["Tags 1th element", "Tags 2th element"]

    def test_untyped_sequence_classifies_elements(self):
        violations: list[Violation] = []
        check_sequence([20, "toolong", None], Kind.SEQUENCE, "Mixed", _constraints("max:5"), violations)
        assert [(v.field, v.message) for v in violations] == [
            ("Mixed 0th element", "value can't be more than max"),
            ("Mixed 1th element", "length can't be more than max"),
        ]

    def test_custom_label(self):
        violations: list[Violation] = []
        check_sequence([1, 2], Kind.SEQUENCE_OF_INT, "Ids", _constraints("min:2"), violations, "{field}[{index}]")
        assert [v.field for v in violations] == ["Ids[0]"]

    def test_empty_sequence(self):
        violations: list[Violation] = []
        check_sequence([], Kind.SEQUENCE_OF_INT, "Ids", _constraints("len:1"), violations)
        assert violations == []


class TestCheckConstraints:
    """Test kind dispatch."""

    def test_unsupported_kind_passes(self):
        violations: list[Violation] = []
        check_constraints(3.5, Kind.UNSUPPORTED, "Ratio", _constraints("max:1;len:1"), violations)
        assert violations == []

    def test_dispatch_text(self):
        violations: list[Violation] = []
        check_constraints("abc", Kind.TEXT, "Name", _constraints("len:2"), violations)
        assert _kinds(violations) == [ViolationKind.LEN]

    def test_empty_constraints(self):
        violations: list[Violation] = []
        check_constraints(10, Kind.INTEGER, "Count", ConstraintSet(), violations)
        assert violations == []
