# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Define Tag class to hold a DICOM (group, element) tag and related functions.

The 4 bytes of the DICOM tag are stored as an 'int'. Tags are
stored as a single number and separated to (group, element) as required.
In Native DICOM Model documents the tag is written as eight hexadecimal
digits, e.g. ``tag="0020000D"``.
"""
from contextlib import contextmanager
from typing import Tuple, Any, Union, TypeVar, Optional, Iterator


T = TypeVar("T", int, str)
TagType = Union[int, str, Tuple[int, int], Tuple[str, str]]


def Tag(arg: Union[T, Tuple[T, T]], arg2: Optional[T] = None) -> "BaseTag":
    """Create a :class:`BaseTag`.

    General function for creating a :class:`BaseTag` in any of the standard
    forms:

    * ``Tag(0x00100015)``
    * ``Tag('00100015')``
    * ``Tag('0x00100015')``
    * ``Tag('(0010,0015)')`` or ``Tag('0010,0015')``
    * ``Tag((0x10, 0x15))``
    * ``Tag(('0x10', '0x15'))``
    * ``Tag(0x0010, 0x0015)``
    * ``Tag('0xFE', '0x0010')``

    Parameters
    ----------
    arg : int or str or 2-tuple
        If :class:`int` or :class:`str`, then either the group or the combined
        group/element number of the DICOM tag. If :class:`tuple` then the
        (group, element) numbers as :class:`!int` or :class:`!str`.
    arg2 : int or str, optional
        The element number of the DICOM tag, required when `arg` only contains
        the group number of the tag.

    Returns
    -------
    BaseTag

    Raises
    ------
    ValueError
        If the arguments can't be interpreted as a tag or are negative.
    OverflowError
        If the tag doesn't fit in 32 bits.
    """
    if isinstance(arg, BaseTag):
        return arg

    if arg2 is not None:
        # act as if was passed a single tuple
        arg = (arg, arg2)  # type: ignore

    # "(gggg,eeee)" and "gggg,eeee"
    if isinstance(arg, str) and "," in arg:
        arg = tuple(  # type: ignore
            part.strip() for part in arg.strip().strip("()").split(",")
        )

    if isinstance(arg, (tuple, list)):
        if len(arg) != 2:
            raise ValueError("Tag must be created using an int or 2-tuple")

        valid = False
        if isinstance(arg[0], str):
            valid = isinstance(arg[1], str)
            if valid:
                try:
                    arg = (int(arg[0], 16), int(arg[1], 16))  # type: ignore
                except ValueError:
                    raise ValueError(
                        f"'{arg[0]}, {arg[1]}' is not a valid DICOM tag"
                    )
        elif isinstance(arg[0], int):
            valid = isinstance(arg[1], int)
        if not valid:
            raise ValueError(
                "Both arguments for Tag must be the same type, either "
                "string or int."
            )

        if arg[0] > 0xFFFF or arg[1] > 0xFFFF:  # type: ignore
            raise OverflowError(
                "Groups and elements of tags must each be <=2 byte integers"
            )
        if arg[0] < 0 or arg[1] < 0:  # type: ignore
            raise ValueError("Tags must be positive.")

        long_value = (arg[0] << 16) | arg[1]  # type: ignore

    # Single str parameter
    elif isinstance(arg, str):
        try:
            long_value = int(arg, 16)
        except ValueError:
            raise ValueError(f"'{arg}' is not a valid DICOM tag")
        if long_value > 0xFFFFFFFF:
            raise OverflowError(
                f"Tags are limited to 32-bit length; tag {long_value!r}"
            )
    # Single int parameter
    elif isinstance(arg, int) and not isinstance(arg, bool):
        long_value = arg
        if long_value > 0xFFFFFFFF:
            raise OverflowError(
                f"Tags are limited to 32-bit length; tag {long_value!r}"
            )
    else:
        raise ValueError(f"Unable to create a tag from {arg!r}")

    if long_value < 0:
        raise ValueError("Tags must be positive.")

    return BaseTag(long_value)


class BaseTag(int):
    """Represents a DICOM element (group, element) tag.

    Tags are represented as an :class:`int`.

    Attributes
    ----------
    element : int
        The element number of the tag.
    group : int
        The group number of the tag.
    is_private : bool
        Returns ``True`` if the corresponding element is private, ``False``
        otherwise.
    """
    # Override comparisons so can convert "other" to Tag as necessary
    def __le__(self, other: Any) -> bool:
        """Return ``True`` if `self`  is less than or equal to `other`."""
        return self == other or self < other

    def __lt__(self, other: Any) -> bool:
        """Return ``True`` if `self` is less than `other`."""
        # Check if comparing with another Tag object; if not, create a temp one
        if not isinstance(other, BaseTag):
            try:
                other = Tag(other)
            except Exception:
                raise TypeError("Cannot compare Tag with non-Tag item")

        return int(self) < int(other)

    def __ge__(self, other: Any) -> bool:
        """Return ``True`` if `self` is greater than or equal to `other`."""
        return self == other or self > other

    def __gt__(self, other: Any) -> bool:
        """Return ``True`` if `self` is greater than `other`."""
        return not (self == other or self < other)

    def __eq__(self, other: Any) -> bool:
        """Return ``True`` if `self` equals `other`."""
        # Check if comparing with another Tag object; if not, create a temp one
        if not isinstance(other, int):
            try:
                other = Tag(other)
            except Exception:
                raise TypeError("Cannot compare Tag with non-Tag item")

        return int(self) == int(other)

    def __ne__(self, other: Any) -> bool:
        """Return ``True`` if `self` does not equal `other`."""
        return not self == other

    # any override of __eq__ requires explicit redirect of hash function
    # to the parent class
    __hash__ = int.__hash__

    def __str__(self) -> str:
        """Return the tag value as a hex string '(gggg, eeee)'."""
        return "({0:04x}, {1:04x})".format(self.group, self.element)

    __repr__ = __str__

    @property
    def group(self) -> int:
        """Return the tag's group number as :class:`int`."""
        return self >> 16

    @property
    def element(self) -> int:
        """Return the tag's element number as :class:`int`."""
        return self & 0xffff

    elem = element  # alternate syntax

    @property
    def is_private(self) -> bool:
        """Return ``True`` if the tag is private (has an odd group number)."""
        return self.group % 2 == 1

    @property
    def is_private_creator(self) -> bool:
        """Return ``True`` if the tag is a private creator."""
        return self.is_private and 0x0010 <= self.element < 0x0100


def tag_to_string(tag: TagType) -> str:
    """Return `tag` in the form used by the ``tag`` attribute of a
    Native DICOM Model ``DicomAttribute``: eight upper-case hex digits.

    Examples
    --------
    >>> tag_to_string(0x0020000D)
    '0020000D'
    """
    return f"{Tag(tag):08X}"


@contextmanager
def tag_in_exception(tag: BaseTag) -> Iterator[None]:
    """Use `tag` within a context.

    Used to include the tag details in the message when an exception is
    raised within the context. The exception is re-raised with the same
    type and chained to the original.

    Parameters
    ----------
    tag : BaseTag
        The tag to use in the context.
    """
    try:
        yield
    except Exception as ex:
        msg = f"With tag {tag} got exception: {str(ex)}"
        raise type(ex)(msg) from ex
