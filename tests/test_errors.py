import pytest

from hdftypes.errors import (
    ErrorFrame,
    ErrorStack,
    H5Error,
    InternalError,
    LibraryError,
    h5check,
)


def _close_twice_stack():
    stack = ErrorStack()
    stack.push(ErrorFrame("can't close", "H5Pclose", "Property lists", "Unable to free object"))
    stack.push(
        ErrorFrame(
            "can't locate ID",
            "H5I_dec_ref",
            "Object atom",
            "Unable to find atom information (already closed?)",
        )
    )
    return stack


def test_error_stack():
    stack = _close_twice_stack()
    assert stack.description == "H5Pclose(): can't close: can't locate ID"
    assert stack.detail() == (
        "Error in H5Pclose(): can't close [Property lists: Unable to free object]"
    )
    assert 2 <= len(stack) <= 3
    assert len(stack) > 0
    assert stack[0].description == "H5Pclose(): can't close"
    assert stack[0].detail() == (
        "Error in H5Pclose(): can't close [Property lists: Unable to free object]"
    )
    assert stack[len(stack) - 1].description == "H5I_dec_ref(): can't locate ID"
    assert stack[len(stack) - 1].detail() == (
        "Error in H5I_dec_ref(): can't locate ID "
        "[Object atom: Unable to find atom information (already closed?)]"
    )


def test_empty_stack():
    empty = ErrorStack()
    assert len(empty) == 0
    assert empty.top() is None
    assert empty.detail() is None
    assert empty.description == "unknown library error"


def test_single_frame_description():
    stack = ErrorStack()
    stack.push(ErrorFrame("can't close", "H5Pclose", "Property lists", "Unable to free object"))
    assert stack.description == "H5Pclose(): can't close"
    assert stack.top() is stack[0]


def test_library_error_message():
    err = LibraryError(_close_twice_stack())
    assert str(err) == "H5Pclose(): can't close: can't locate ID"
    assert err.description == str(err)
    assert isinstance(err, H5Error)


def test_internal_error():
    err = InternalError("Invalid dataset id: 5")
    assert err.description == "Invalid dataset id: 5"
    assert isinstance(err, H5Error)


def test_h5check_ok():
    assert h5check(100, True, lambda: _close_twice_stack()) == 100


def test_h5check_error_raises():
    with pytest.raises(LibraryError) as info:
        h5check(-1, True, _close_twice_stack)
    assert info.value.stack[0].func == "H5Pclose"


def test_h5check_failure_without_stack_returns_value():
    assert h5check(-1, True, lambda: None) == -1
    assert h5check(-1, True, ErrorStack) == -1


def test_h5check_unsigned_zero():
    with pytest.raises(LibraryError):
        h5check(0, False, _close_twice_stack)
    assert h5check(0, True, _close_twice_stack) == 0