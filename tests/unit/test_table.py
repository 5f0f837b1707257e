#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_table.py
"""Unit tests for Table.

Tests cover:
- Column derivation and projection
- Header, body and footer sections
- Pretty printing
- Missing column handling
- Class-level and instance-level chaining

"""

import logging

import pytest

from htmltable import (
    InvalidOptionsError,
    MissingColumnError,
    RenderingError,
    Table,
    TableOptions,
    UnknownOperationError,
    ValidationError,
)


@pytest.mark.unit
class TestSections:
    """Tests for thead, tbody and tfoot rendering."""

    def test_end_to_end_compact(self):
        """Test the complete output of a small table."""
        table = Table().set_header({"a": "A"}).set_body([{"a": "1"}, {"a": "2"}])
        assert table.render() == (
            '<table border="1"><thead><tr><th>A</th></tr></thead>'
            "<tbody><tr><td>1</td></tr><tr><td>2</td></tr></tbody></table>"
        )

    def test_empty_table(self):
        """Test that an empty table still renders the table element."""
        assert Table().render() == '<table border="1"></table>'

    def test_header_only(self, people_header):
        """Test that header cells follow the header key order."""
        result = Table().set_header(people_header).render()
        assert result == '<table border="1"><thead><tr><th>Name</th><th>City</th></tr></thead></table>'

    def test_body_without_header_uses_explicit_columns(self):
        """Test a body-only table."""
        result = Table().set_columns(["x"]).add_row({"x": "1"}).render()
        assert result == '<table border="1"><tbody><tr><td>1</td></tr></tbody></table>'

    def test_body_without_header_or_columns_renders_empty_rows(self):
        """Test that rows have no cells when no columns can be derived."""
        result = Table().add_row({"x": "1"}).render()
        assert result == '<table border="1"><tbody><tr></tr></tbody></table>'

    def test_footer(self):
        """Test that the footer uses td cells."""
        table = Table().set_header({"a": "A"}).set_footer({"a": "Total"})
        assert table.render() == (
            '<table border="1"><thead><tr><th>A</th></tr></thead><tfoot><tr><td>Total</td></tr></tfoot></table>'
        )

    def test_set_footer_does_not_touch_header(self):
        """Test that setting the footer leaves the header alone."""
        table = Table().set_header({"a": "A"}).set_footer({"a": "Sum"})
        assert table.header == {"a": "A"}
        assert table.footer == {"a": "Sum"}

    def test_header_as_footer(self):
        """Test that the header values are repeated in the footer."""
        result = Table().set_header({"name": "Name"}).use_header_as_footer().render()
        assert result == (
            '<table border="1"><thead><tr><th>Name</th></tr></thead><tfoot><tr><td>Name</td></tr></tfoot></table>'
        )

    def test_header_as_footer_overrides_footer(self):
        """Test that the header wins over an explicit footer when enabled."""
        table = Table().set_header({"a": "A"}).set_footer({"a": "F"}).use_header_as_footer()
        assert "<tfoot><tr><td>A</td></tr></tfoot>" in table.render()

    def test_header_as_footer_disabled(self):
        """Test turning the flag back off."""
        table = Table().set_header({"a": "A"}).use_header_as_footer().use_header_as_footer(False)
        assert not table.header_as_footer
        assert "<tfoot>" not in table.render()

    def test_values_escaped(self):
        """Test that header and body values are escaped."""
        result = Table().set_header({"a": "<A>"}).add_row({"a": "x & y"}).render()
        assert "<th>&lt;A&gt;</th>" in result
        assert "<td>x &amp; y</td>" in result

    def test_str_matches_render(self, people_table):
        """Test that str() renders compactly."""
        assert str(people_table) == people_table.render(False)


@pytest.mark.unit
class TestColumns:
    """Tests for column derivation and projection."""

    def test_columns_derived_from_header(self, people_table):
        """Test that the header key order decides the column order."""
        result = people_table.render()
        assert "<tr><th>Name</th><th>City</th></tr>" in result
        assert "<tr><td>Jo</td><td>NYC</td></tr>" in result
        assert "<tr><td>Ann</td><td>Dallas</td></tr>" in result

    def test_column_order_wins_over_row_order(self):
        """Test projection of a row onto explicit columns."""
        table = Table().set_columns(["name", "city"]).add_row({"city": "NYC", "name": "Jo"})
        assert "<tr><td>Jo</td><td>NYC</td></tr>" in table.render()

    def test_columns_select_and_reorder(self, people_table):
        """Test that explicit columns can drop and reorder values."""
        result = people_table.set_columns(["city"]).render()
        assert "<thead><tr><th>City</th></tr></thead>" in result
        assert "<tr><td>NYC</td></tr><tr><td>Dallas</td></tr>" in result

    def test_derived_columns_not_stored(self, people_table):
        """Test that rendering leaves the explicit columns empty."""
        first = people_table.render()
        assert people_table.columns == []
        people_table.set_header({"city": "City", "name": "Name"})
        second = people_table.render()
        assert first != second
        assert "<tr><td>NYC</td><td>Jo</td></tr>" in second

    def test_render_is_idempotent(self, people_table):
        """Test that repeated renders produce the same markup."""
        assert people_table.render() == people_table.render()

    def test_effective_columns(self, people_table):
        """Test the columns reported for rendering."""
        assert people_table.effective_columns() == ["name", "city"]
        people_table.set_columns(("city",))
        assert people_table.effective_columns() == ["city"]

    def test_sequence_rows(self):
        """Test header and rows given as plain lists."""
        table = Table().set_header(["Name", "Email"]).set_body([["John", "j@x.org"], ["Jane", "jane@x.org"]])
        assert table.effective_columns() == [0, 1]
        assert table.render() == (
            '<table border="1"><thead><tr><th>Name</th><th>Email</th></tr></thead>'
            "<tbody><tr><td>John</td><td>j@x.org</td></tr><tr><td>Jane</td><td>jane@x.org</td></tr></tbody></table>"
        )

    def test_numeric_keys_in_mappings(self):
        """Test integer column keys in mappings."""
        table = Table().set_columns([2, 1]).add_row({1: "one", 2: "two"})
        assert "<tr><td>two</td><td>one</td></tr>" in table.render()

    def test_set_body_appends(self):
        """Test that set_body adds to the existing rows."""
        table = Table().set_columns(["a"]).add_row({"a": "1"}).set_body([{"a": "2"}]).set_body([{"a": "3"}])
        assert [row["a"] for row in table.body] == ["1", "2", "3"]

    def test_string_columns_rejected(self):
        """Test that a bare string is not taken as a list of columns."""
        with pytest.raises(ValidationError):
            Table().set_columns("name")

    def test_invalid_row_rejected(self):
        """Test that rows must be mappings or sequences."""
        with pytest.raises(ValidationError) as exc_info:
            Table().add_row("not a row")
        assert exc_info.value.parameter_name == "row"


@pytest.mark.unit
class TestMissingColumns:
    """Tests for rows lacking a column value."""

    def test_missing_body_value_raises(self):
        """Test that a missing body value names the column and row."""
        table = Table().set_header({"a": "A", "b": "B"}).set_body([{"a": "1", "b": "2"}, {"a": "3"}])
        with pytest.raises(MissingColumnError) as exc_info:
            table.render()
        error = exc_info.value
        assert error.column == "b"
        assert error.section == "tbody"
        assert error.row_index == 1
        assert "'b'" in str(error)

    def test_missing_header_value_raises(self):
        """Test a header that lacks an explicit column."""
        table = Table().set_columns(["a", "b"]).set_header({"a": "A"})
        with pytest.raises(MissingColumnError) as exc_info:
            table.render()
        assert exc_info.value.section == "thead"
        assert exc_info.value.row_index is None

    def test_missing_footer_value_raises(self):
        """Test a footer that lacks a header column."""
        table = Table().set_header({"a": "A", "b": "B"}).set_footer({"a": "x"})
        with pytest.raises(MissingColumnError) as exc_info:
            table.render()
        assert exc_info.value.section == "tfoot"

    def test_short_sequence_row_raises(self):
        """Test a positional row with too few values."""
        table = Table().set_header(["A", "B"]).add_row(["1"])
        with pytest.raises(MissingColumnError):
            table.render()

    def test_string_column_on_sequence_row_raises(self):
        """Test that positional rows only answer to integer columns."""
        table = Table().set_columns(["a"]).add_row(["1"])
        with pytest.raises(MissingColumnError):
            table.render()

    def test_error_hierarchy(self):
        """Test that the error is both a RenderingError and a KeyError."""
        table = Table().set_columns(["a"]).add_row({})
        with pytest.raises(RenderingError):
            table.render()
        with pytest.raises(KeyError):
            table.render()

    def test_empty_policy_renders_empty_cell(self, caplog):
        """Test the lenient policy."""
        table = Table(TableOptions(missing_column="empty")).set_header({"a": "A", "b": "B"}).add_row({"a": "1"})
        with caplog.at_level(logging.WARNING, logger="htmltable.table"):
            result = table.render()
        assert "<tr><td>1</td><td></td></tr>" in result
        assert "Missing value for column 'b'" in caplog.text


@pytest.mark.unit
class TestPrettyRendering:
    """Tests for indented output."""

    def test_pretty_header_only(self):
        """Test the complete layout of a pretty table."""
        row = "<tr>\n      <th>\n        A\n      </th>\n\n    </tr>\n\n"
        thead = "<thead>\n    " + row + "\n  </thead>\n"
        expected = '<table border="1">\n   ' + thead + "\n </table>\n"
        assert Table().set_header({"a": "A"}).render(pretty=True) == expected

    def test_pretty_body_is_indented(self):
        """Test that the body block is pretty printed like the other blocks."""
        result = Table().set_header({"a": "A"}).add_row({"a": "1"}).render(True)
        assert "<tbody>\n    <tr>\n      <td>\n        1\n      </td>\n" in result

    def test_pretty_from_options(self):
        """Test that options decide the default mode."""
        table = Table(TableOptions(pretty=True)).set_header({"a": "A"})
        assert table.render() == table.render(pretty=True)
        assert table.render(pretty=False) == '<table border="1"><thead><tr><th>A</th></tr></thead></table>'


@pytest.mark.unit
class TestChaining:
    """Tests for class-level and instance-level setters."""

    def test_class_level_call_creates_table(self):
        """Test that a setter called on the class returns a new table."""
        table = Table.set_header({"a": "A"})
        assert isinstance(table, Table)
        assert table.header == {"a": "A"}

    def test_class_level_calls_are_independent(self):
        """Test that each class-level call builds a fresh table."""
        first = Table.add_row({"a": "1"})
        second = Table.add_row({"a": "2"})
        assert first is not second
        assert len(first.body) == 1
        assert len(second.body) == 1

    def test_chain_in_any_order(self):
        """Test starting a chain from any setter."""
        a = Table.set_columns(["a"]).set_header({"a": "A"}).add_row({"a": "1"})
        b = Table.add_row({"a": "1"}).set_header({"a": "A"}).set_columns(["a"])
        assert a.render() == b.render()

    def test_instance_setters_return_self(self):
        """Test that instance setters mutate and return the same table."""
        table = Table()
        assert table.set_header({"a": "A"}) is table
        assert table.use_header_as_footer() is table
        assert table.set_options(TableOptions()) is table

    def test_unknown_class_level_operation(self):
        """Test calling an unknown operation on the class."""
        with pytest.raises(UnknownOperationError) as exc_info:
            Table.set_caption("x")
        assert str(exc_info.value) == "Cannot call Table::set_caption() because it does not exist"

    def test_unknown_instance_operation(self):
        """Test calling an unknown operation on an instance."""
        with pytest.raises(UnknownOperationError) as exc_info:
            Table().set_header({"a": "A"}).frobnicate()
        assert exc_info.value.class_name == "Table"
        assert exc_info.value.method_name == "frobnicate"

    def test_unknown_operation_is_attribute_error(self):
        """Test that getattr defaults keep working."""
        assert getattr(Table, "set_caption", None) is None
        assert getattr(Table(), "set_caption", None) is None


@pytest.mark.unit
class TestOptions:
    """Tests for options handling on the table."""

    def test_default_options(self):
        """Test the default options."""
        options = Table().options
        assert options.pretty is False
        assert options.missing_column == "raise"

    def test_wrong_options_type(self):
        """Test that non-TableOptions objects are rejected."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            Table(options={"pretty": True})
        assert exc_info.value.expected_type is TableOptions
        assert exc_info.value.received_type is dict
