# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Functions related to writing Native DICOM Model XML documents."""

import os
from typing import BinaryIO, Optional, Union
from xml.etree import ElementTree

from nativedicom import config
from nativedicom.config import logger
from nativedicom.model import NativeDicomModel


PathType = Union[str, "os.PathLike[str]"]

# CR in element text is written as a character reference
_CR_REFERENCE = "&#13;"


def _build_tree(
    model: NativeDicomModel, pretty: Optional[bool]
) -> ElementTree.ElementTree:
    """Return a new tree for `model`, indented as requested by `pretty`.

    Parameters
    ----------
    model : NativeDicomModel
        The document to write.
    pretty : bool or None
        ``True`` to indent, ``False`` not to, ``None`` to indent only when
        :data:`~nativedicom.config.write_indent` is set.
    """
    if not isinstance(model, NativeDicomModel):
        raise TypeError(
            f"Expected a NativeDicomModel, not {type(model).__name__}"
        )

    tree = ElementTree.ElementTree()
    model.serialize(tree)

    indent = config.write_indent
    if pretty is None:
        pretty = indent is not None
    if pretty:
        ElementTree.indent(tree, space=indent or "  ")

    return tree


def xmlwrite(
    fp: Union[PathType, BinaryIO],
    model: NativeDicomModel,
    pretty: Optional[bool] = None
) -> None:
    """Write `model` to `fp` as UTF-8 encoded XML.

    Parameters
    ----------
    fp : str or PathLike or file-like
        The file name, path or a file-like object opened in ``'wb'`` mode
        to write to.
    model : NativeDicomModel
        The document to write.
    pretty : bool, optional
        ``True`` to indent the document, ``False`` to write it without added
        whitespace. By default the document is indented using
        :data:`~nativedicom.config.write_indent` unless that is ``None``.

    See Also
    --------
    nativedicom.filereader.xmlread
        Read a document written by :func:`xmlwrite`.
    """
    tree = _build_tree(model, pretty)
    if isinstance(fp, (str, os.PathLike)):
        logger.debug(f"Writing file '{os.fspath(fp)}'")
    else:
        logger.debug(f"Writing to '{getattr(fp, 'name', '<buffer>')}'")

    data = ElementTree.tostring(
        tree.getroot(),
        encoding="utf-8",
        xml_declaration=config.write_xml_declaration
    ).replace(b"\r", _CR_REFERENCE.encode("ascii"))

    if isinstance(fp, (str, os.PathLike)):
        with open(fp, "wb") as f:
            f.write(data)
    else:
        fp.write(data)


def to_xml_string(
    model: NativeDicomModel, pretty: Optional[bool] = None
) -> str:
    """Return `model` as an XML :class:`str`.

    The string carries no XML declaration, so it can be parsed again with
    :func:`~nativedicom.filereader.read_xml_string`. Carriage returns in
    element text are written as ``&#13;``.

    Parameters
    ----------
    model : NativeDicomModel
        The document to write.
    pretty : bool, optional
        As for :func:`xmlwrite`.
    """
    tree = _build_tree(model, pretty)
    text = ElementTree.tostring(tree.getroot(), encoding="unicode")
    return text.replace("\r", _CR_REFERENCE)
