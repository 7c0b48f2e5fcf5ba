# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Tests for errors.py"""

import pytest

from nativedicom.errors import (
    AccessorContractError,
    DuplicateTagError,
    EmptyValueError,
    HeterogeneousValueError,
    InvalidNativeModelError,
    InvalidVRError,
    MutualExclusionError,
    NotUniqueError,
    ShapeMismatchError,
)


ALL_ERRORS = [
    AccessorContractError,
    DuplicateTagError,
    EmptyValueError,
    HeterogeneousValueError,
    InvalidVRError,
    MutualExclusionError,
    NotUniqueError,
    ShapeMismatchError,
]


def assert_raises_regex(type_error, message, func, *args, **kwargs):
    """Test a raised exception against an expected exception.

    Parameters
    ----------
    type_error : Exception
        The expected raised exception.
    message : str
        A string that will be used as a regex pattern to match against the
        actual exception message. If using the actual expected message don't
        forget to escape any regex special characters like '|', '(', ')', etc.
    func : callable
        The function that is expected to raise the exception.
    args
        The callable function `func`'s arguments.
    kwargs
        The callable function `func`'s keyword arguments.

    Notes
    -----
    Taken from https://github.com/glemaitre/specio, BSD 3 license.
    """
    with pytest.raises(type_error) as excinfo:
        func(*args, **kwargs)
    excinfo.match(message)


def test_message():
    """Test InvalidNativeModelError with a message"""
    def _test():
        raise InvalidNativeModelError('test msg')
    assert_raises_regex(InvalidNativeModelError, 'test msg', _test)


def test_no_message():
    """Test InvalidNativeModelError with no message"""
    def _test():
        raise InvalidNativeModelError
    assert_raises_regex(
        InvalidNativeModelError,
        'The document is not a valid Native DICOM Model.',
        _test
    )


@pytest.mark.parametrize("cls", ALL_ERRORS)
def test_hierarchy(cls):
    """Test every error can be caught as the base error or ValueError"""
    assert issubclass(cls, InvalidNativeModelError)
    assert issubclass(cls, ValueError)


@pytest.mark.parametrize("cls", ALL_ERRORS)
def test_default_message(cls):
    """Test every error has its own default message"""
    assert str(cls()) == cls.default_message
    assert cls.default_message != InvalidNativeModelError.default_message
