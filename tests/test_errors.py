"""Tests for error combination."""

from pgkit.engine.errors import CombinedError, PgkitError, combine_errors


def test_nothing_to_combine():
    assert combine_errors() is None
    assert combine_errors(None, None) is None


def test_single_error_is_returned_as_is():
    err = RuntimeError("boom")
    assert combine_errors(err, None) is err
    assert combine_errors(None, err) is err


def test_two_errors_are_kept():
    first = RuntimeError("query failed")
    second = OSError("close failed")
    combined = combine_errors(first, second)
    assert isinstance(combined, CombinedError)
    assert isinstance(combined, PgkitError)
    assert combined.errors == (first, second)
    assert "RuntimeError: query failed" in str(combined)
    assert "OSError: close failed" in str(combined)


def test_nested_combined_errors_are_flattened():
    a, b, c = ValueError("a"), ValueError("b"), ValueError("c")
    combined = combine_errors(combine_errors(a, b), c)
    assert combined.errors == (a, b, c)


def test_error_without_message():
    combined = combine_errors(KeyError(), RuntimeError("x"))
    assert str(combined).startswith("KeyError")
