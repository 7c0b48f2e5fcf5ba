# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Read a Native DICOM Model XML document."""

import os
from typing import BinaryIO, Union
from xml.etree import ElementTree

from nativedicom import config
from nativedicom.config import logger
from nativedicom.model import NativeDicomModel


PathType = Union[str, "os.PathLike[str]"]


def xmlread(fp: Union[PathType, BinaryIO]) -> NativeDicomModel:
    """Read and parse a Native DICOM Model document.

    Parameters
    ----------
    fp : str or PathLike or file-like
        Either a file-like object, a string containing the file name or the
        path to the file. The file-like object must have ``read()`` and be
        opened in ``'rb'`` mode.

    Returns
    -------
    NativeDicomModel
        The parsed document.

    Raises
    ------
    xml.etree.ElementTree.ParseError
        If the file isn't well-formed XML.
    InvalidNativeModelError
        If the XML isn't a valid Native DICOM Model document.

    Examples
    --------
    >>> model = nativedicom.xmlread("study.xml")
    >>> model.dataset.get_attribute_by_tag("00100020").extract_value()
    '12345'
    """
    if isinstance(fp, (str, os.PathLike)):
        logger.debug(f"Reading file '{os.fspath(fp)}'")
    else:
        logger.debug(f"Reading from '{getattr(fp, 'name', '<buffer>')}'")

    tree = ElementTree.parse(fp)
    return _parse_root(tree.getroot())


def read_xml_string(text: Union[str, bytes]) -> NativeDicomModel:
    """Parse a Native DICOM Model document held in `text`.

    Parameters
    ----------
    text : str or bytes
        The XML document. A document with an encoding declaration must be
        passed as :class:`bytes`.
    """
    logger.debug(f"Reading XML document of length {len(text)}")
    return _parse_root(ElementTree.fromstring(text))


def _parse_root(root: ElementTree.Element) -> NativeDicomModel:
    model = NativeDicomModel.from_xml(root)
    if config.debugging:
        logger.debug(
            f"Parsed {len(model.dataset)} top-level attribute(s), "
            f"{sum(1 for _ in model.dataset.iterall())} in total"
        )

    return model
