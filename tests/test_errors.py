import pytest

from nitpoker.errors import DomainError, Error, InvalidArgument, LogicError, ParseError


@pytest.mark.parametrize("cls", [Error, ParseError, InvalidArgument, DomainError, LogicError])
def test_message_is_kept(cls):
    err = cls("something went wrong")
    assert str(err) == "something went wrong"
    assert err.message == "something went wrong"


@pytest.mark.parametrize("cls", [ParseError, InvalidArgument, DomainError, LogicError])
def test_all_derive_from_error(cls):
    err = cls("boom")
    assert isinstance(err, Error)
    assert str(err) == "boom"


def test_domain_error_is_invalid_argument():
    err = DomainError("out of range")
    assert isinstance(err, InvalidArgument)
    assert err.message == "out of range"
    with pytest.raises(InvalidArgument, match="out of range"):
        raise err


def test_invalid_argument_is_value_error():
    err = InvalidArgument("bad")
    assert isinstance(err, ValueError)
    assert str(err) == "bad"
    with pytest.raises(ValueError, match="bad"):
        raise err


def test_parse_error_is_not_invalid_argument():
    parse_err = ParseError("unparsable")
    logic_err = LogicError("broken precondition")
    assert not isinstance(parse_err, InvalidArgument)
    assert not isinstance(logic_err, InvalidArgument)
    assert parse_err.message == "unparsable"
    assert logic_err.message == "broken precondition"