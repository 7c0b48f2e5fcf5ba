# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""nativedicom package -- read and write DICOM Native DICOM Model XML.

-----------
Quick Start
-----------
1. Read a document, look up an attribute and write the document back::

    >>> import nativedicom
    >>> model = nativedicom.xmlread("study.xml")
    >>> model.dataset.get_attribute_by_tag("00100020").extract_value()
    '12345'
    >>> nativedicom.xmlwrite("copy.xml", model)

2. Build a document in memory::

    >>> from nativedicom import (
    ...     DicomDataSet, NativeDicomModel, values_attribute
    ... )
    >>> ds = DicomDataSet([values_attribute("00280010", "US", [512])])
    >>> print(nativedicom.to_xml_string(NativeDicomModel(ds)))

3. Learn the methods of the DicomAttribute class; the typed accessors
``get_value()``, ``get_items()``, ``get_person_name()`` and so on raise
:class:`~nativedicom.errors.AccessorContractError` when the attribute
doesn't hold what they ask for.
"""

from nativedicom._version import __version__, __version_info__
from nativedicom.dataelem import (
    DicomAttribute, person_name_attribute, values_attribute
)
from nativedicom.dataset import DicomDataSet
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
from nativedicom.filereader import read_xml_string, xmlread
from nativedicom.filewriter import to_xml_string, xmlwrite
from nativedicom.model import NativeDicomModel
from nativedicom.sequence import Item
from nativedicom.tag import BaseTag, Tag, tag_to_string
from nativedicom.valuerep import (
    BulkData, InlineBinary, NameComponents, PersonName, Value, ValueKind
)
from nativedicom.vr import VR

__all__ = [
    'AccessorContractError',
    'BaseTag',
    'BulkData',
    'DicomAttribute',
    'DicomDataSet',
    'DuplicateTagError',
    'EmptyValueError',
    'HeterogeneousValueError',
    'InlineBinary',
    'InvalidNativeModelError',
    'InvalidVRError',
    'Item',
    'MutualExclusionError',
    'NameComponents',
    'NativeDicomModel',
    'NotUniqueError',
    'PersonName',
    'ShapeMismatchError',
    'Tag',
    'VR',
    'Value',
    'ValueKind',
    '__version__',
    '__version_info__',
    'person_name_attribute',
    'read_xml_string',
    'tag_to_string',
    'to_xml_string',
    'values_attribute',
    'xmlread',
    'xmlwrite',
]
