"""Unit tests for keyedcollection.utils.representation.summary module."""

import pytest

from keyedcollection.utils.representation.summary import format_summary_box


@pytest.mark.unit
def test_empty_rows():
    text = format_summary_box(title="Empty", rows=[])
    assert "(no data)" in text


@pytest.mark.unit
def test_nested_rows_expand_vertically():
    rows = [("outer", [("inner", [("leaf", "1")])])]
    lines = format_summary_box(title="T", rows=rows).splitlines()
    assert "outer :" in lines[1]
    assert "inner : [leaf=1]" in lines[2]


@pytest.mark.unit
def test_long_lines_are_truncated():
    text = format_summary_box(title="T", rows=[("k", "x" * 200)], max_width=30)
    assert all(len(line) <= 30 for line in text.splitlines())
    assert "..." in text


@pytest.mark.unit
def test_invalid_row_raises():
    with pytest.raises(ValueError, match="Invalid SummaryRow"):
        format_summary_box(title="T", rows=["not a tuple"])
