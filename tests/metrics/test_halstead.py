"""Tests for Halstead operator/operand tallying and derived measures."""

import math

import pytest

from go_complexity.analyzer import parse
from go_complexity.metrics.halstead import (
    HalsteadMetrics,
    Label,
    Role,
    TallyTable,
    halstead_metrics,
    tally,
)


def _tally(single_function, body, signature="func f()"):
    return tally(single_function(body, signature).node)


class TestTallyTable:
    def test_add_routes_by_role(self):
        table = TallyTable()
        table.add(Label(Role.OPERATOR, "+"))
        table.add(Label(Role.OPERATOR, "+"))
        table.add(Label(Role.OPERAND, "x"))
        assert table.distinct_operators == 1
        assert table.total_operators == 2
        assert table.distinct_operands == 1
        assert table.total_operands == 1

    def test_fresh_tables_are_independent(self, single_function):
        """Tallying twice never accumulates across calls."""
        fn = single_function("x := 1\n")
        assert tally(fn.node) == tally(fn.node)


class TestDerivedMeasures:
    def test_formulas(self):
        table = TallyTable()
        for key in ("return", "+"):
            table.add(Label(Role.OPERATOR, key))
        for key in ("a", "a", "b", "b"):
            table.add(Label(Role.OPERAND, key))
        m = HalsteadMetrics.from_tally(table)
        assert m.vocabulary == 4
        assert m.length == 6
        assert m.volume == pytest.approx(6 * math.log2(4))
        assert m.difficulty == pytest.approx((2 / 2) * (4 / 2))
        assert m.effort == pytest.approx(m.difficulty * m.volume)

    def test_empty_vocabulary(self):
        m = HalsteadMetrics.from_tally(TallyTable())
        assert m.volume == 0.0
        assert m.difficulty == 0.0
        assert m.effort == 0.0

    def test_no_operands_gives_zero_difficulty(self):
        table = TallyTable()
        table.add(Label(Role.OPERATOR, "return"))
        m = HalsteadMetrics.from_tally(table)
        assert m.difficulty == 0.0
        assert m.volume == 0.0

    def test_missing_node(self):
        assert halstead_metrics(None) == HalsteadMetrics()


class TestClassification:
    """Which constructs become which operator category."""

    def test_simple_function(self, simple_source):
        (fn,) = parse("main.go", simple_source).functions()
        table = tally(fn.node)
        assert dict(table.operators) == {"return": 1, "+": 1}
        # the declaration records its name on top of the name identifier
        assert dict(table.operands) == {"add": 2, "a": 2, "b": 2, "int": 2}

    def test_assignment_operators_by_symbol(self, single_function):
        table = _tally(
            single_function,
            """
            x := 1
            x = 2
            x += 3
            x++
            x--
            """,
        )
        assert table.operators[":="] == 1
        assert table.operators["="] == 1
        assert table.operators["+="] == 1
        assert table.operators["++"] == 1
        assert table.operators["--"] == 1

    def test_unary_and_binary(self, single_function):
        table = _tally(single_function, "y := -x * !ok\n")
        assert table.operators["-"] == 1
        assert table.operators["!"] == 1
        assert table.operators["*"] == 1

    def test_channel_operations(self, single_function):
        table = _tally(
            single_function,
            """
            ch <- 1
            v := <-ch
            """,
            signature="func f(ch chan int)",
        )
        # one send statement and one receive expression
        assert table.operators["<-"] == 2
        assert table.operands["chan"] == 1

    def test_receive_with_assignment_in_select(self, single_function):
        table = _tally(
            single_function,
            """
            select {
            case v := <-in:
            	_ = v
            }
            """,
        )
        assert table.operators[":="] == 1
        assert "select" not in table.operators

    def test_calls_and_selectors(self, single_function):
        table = _tally(single_function, "fmt.Println(s.name)\n")
        assert table.operators["call"] == 1
        assert table.operators["."] == 2
        assert table.operands["fmt"] == 1
        assert table.operands["Println"] == 1

    def test_variadic_argument_and_parameter(self, single_function):
        table = _tally(
            single_function,
            "g(args...)\n",
            signature="func f(args ...int)",
        )
        assert table.operators["..."] == 2

    def test_go_and_defer(self, single_function):
        table = _tally(
            single_function,
            """
            go work()
            defer cleanup()
            """,
        )
        assert table.operators["go"] == 1
        assert table.operators["defer"] == 1
        assert table.operators["call"] == 2

    def test_for_and_range(self, single_function):
        table = _tally(
            single_function,
            """
            for i := 0; i < 3; i++ {
            }
            for _, v := range items {
            	_ = v
            }
            """,
        )
        assert table.operators["for"] == 1
        assert table.operators["range"] == 1

    def test_switch_and_cases(self, single_function):
        table = _tally(
            single_function,
            """
            switch x {
            case 1:
            case 2:
            default:
            }
            """,
        )
        assert table.operators["switch"] == 1
        # default counts as a case inside a switch
        assert table.operators["case"] == 3

    def test_type_switch_is_switch_and_assertion(self, single_function):
        table = _tally(
            single_function,
            """
            switch x.(type) {
            case int:
            }
            """,
        )
        assert table.operators["switch"] == 1
        assert table.operators["."] == 1
        assert table.operators["case"] == 1

    def test_default_in_select_is_not_a_case(self, single_function):
        table = _tally(
            single_function,
            """
            select {
            default:
            }
            """,
        )
        assert "case" not in table.operators

    def test_branch_statements(self, single_function):
        table = _tally(
            single_function,
            """
            for {
            	if a {
            		continue
            	}
            	break
            }
            """,
        )
        assert table.operators["break"] == 1
        assert table.operators["continue"] == 1
        assert table.operators["if"] == 1

    def test_literals_are_operands_by_text(self, single_function):
        table = _tally(
            single_function,
            """
            a := "hi\\n"
            b := "hi\\n"
            c := 42
            d := nil
            """,
        )
        assert table.operands['"hi\\n"'] == 2
        assert table.operands["42"] == 1
        assert table.operands["nil"] == 1

    def test_composite_literal_type_counts_twice(self, single_function):
        table = _tally(single_function, "p := Point{X: 1}\n")
        assert table.operands["Point"] == 2

    def test_comments_are_ignored(self, single_function):
        with_comment = _tally(single_function, "x := 1 // one\n")
        without = _tally(single_function, "x := 1\n")
        assert with_comment == without

    def test_type_switch_guard_binding_is_an_assignment(self, single_function):
        table = _tally(
            single_function,
            """
            switch t := v.(type) {
            case int:
            	_ = t
            }
            """,
            signature="func f(v interface{})",
        )
        assert table.operators[":="] == 1
        assert table.operators["switch"] == 1
        assert table.operators["."] == 1

    def test_type_switch_without_binding_has_no_assignment(self, single_function):
        table = _tally(
            single_function,
            """
            switch v.(type) {
            case int:
            }
            """,
            signature="func f(v interface{})",
        )
        assert ":=" not in table.operators
