import pytest

from pushswap.parsing import (
    ParseError,
    check_args,
    check_duplicates,
    check_overflow,
    check_syntax,
    split_args,
    validate_args,
)


@pytest.mark.parametrize("arg", ["42", "-7", "+3", "  15", "0", "-"])
def test_check_syntax_accepts(arg):
    assert check_syntax(arg) is True


@pytest.mark.parametrize("arg", ["", "   ", "4a", "--1", "1 ", "+-2", "1.5"])
def test_check_syntax_rejects(arg):
    assert check_syntax(arg) is False


@pytest.mark.parametrize("arg", ["2147483647", "-2147483648", "0", "\t12"])
def test_check_overflow_in_range(arg):
    assert check_overflow(arg) is True


@pytest.mark.parametrize("arg", ["2147483648", "-2147483649", "99999999999"])
def test_check_overflow_out_of_range(arg):
    assert check_overflow(arg) is False


def test_check_duplicates():
    assert check_duplicates(["1", "2", "3"]) is True
    assert check_duplicates(["1", "2", "1"]) is False
    assert check_duplicates(["+5", "05"]) is False


def test_split_args_single_string():
    assert split_args(["prog", "3  1 2"]) == ["3", "1", "2"]


def test_split_args_many_arguments():
    assert split_args(["prog", "3", "1", "2"]) == ["3", "1", "2"]


def test_split_args_no_arguments():
    assert split_args(["prog"]) == []


def test_split_args_blank_string():
    assert split_args(["prog", "   "]) == []


def test_validate_args_accepts_good_input():
    assert validate_args(["3", "-1", "2147483647"]) is None


@pytest.mark.parametrize(
    "args",
    [["1", "x"], ["1", "2147483648"], ["4", "4"], [""]],
)
def test_validate_args_rejects(args):
    with pytest.raises(ParseError):
        validate_args(args)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        validate_args(["1", "1"])


@pytest.mark.parametrize("args", [[], ["1"]])
def test_check_args_requires_two(args):
    with pytest.raises(ParseError):
        check_args(args)


def test_check_args_validates():
    with pytest.raises(ParseError):
        check_args(["1", "abc"])
    assert check_args(["1", "2"]) is None