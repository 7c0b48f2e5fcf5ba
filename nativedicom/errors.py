# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Module for nativedicom exception classes"""


class InvalidNativeModelError(ValueError):
    """Base class for errors raised while parsing, building or accessing a
    Native DICOM Model tree.

    Every error is fatal to the call that raised it; no partially parsed
    result is returned.
    """
    default_message = 'The document is not a valid Native DICOM Model.'

    def __init__(self, *args):
        if not args:
            args = (self.default_message, )
        super().__init__(*args)


class ShapeMismatchError(InvalidNativeModelError):
    """Raised when an element has an unexpected name or is missing a
    required XML attribute.
    """
    default_message = 'Unexpected element or missing required attribute.'


class InvalidVRError(InvalidNativeModelError):
    """Raised when a ``vr`` is not one of the known Value Representations."""
    default_message = 'Invalid Value Representation.'


class DuplicateTagError(InvalidNativeModelError):
    """Raised when two attributes of the same dataset share a tag."""
    default_message = 'Duplicate tag in dataset.'


class HeterogeneousValueError(InvalidNativeModelError):
    """Raised when the values of an attribute are not all of the same kind,
    e.g. a ``Value`` next to an ``Item``.
    """
    default_message = 'Attribute values are not all of the same kind.'


class MutualExclusionError(InvalidNativeModelError):
    """Raised when a ``BulkData`` has both or neither of ``uuid`` and
    ``uri``.
    """
    default_message = 'BulkData must contain exactly one of uuid and uri.'


class EmptyValueError(InvalidNativeModelError):
    """Raised when required content is missing or empty."""
    default_message = 'Required value is empty.'


class NotUniqueError(InvalidNativeModelError):
    """Raised when an element that may occur at most once is repeated."""
    default_message = 'Element is not unique.'


class AccessorContractError(InvalidNativeModelError):
    """Raised by the typed accessors of
    :class:`~nativedicom.dataelem.DicomAttribute` when the attribute's value
    is absent, has the wrong number of elements or is of the wrong kind.
    """
    default_message = 'Attribute value does not match the accessor.'
