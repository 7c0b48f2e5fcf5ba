# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""nativedicom configuration options."""

# doc strings following items are picked up by sphinx for documentation

import logging
from typing import Optional


write_indent: Optional[str] = "  "
"""Indentation used by :func:`~nativedicom.filewriter.xmlwrite` and
:func:`~nativedicom.filewriter.to_xml_string` when pretty-printing.

Set to ``None`` to write the document without any added whitespace.

Default ``"  "``.
"""

write_xml_declaration = True
"""If ``True`` (default), documents written by
:func:`~nativedicom.filewriter.xmlwrite` start with an
``<?xml version='1.0' encoding='utf-8'?>`` declaration.
"""

# Logging system and debug function to change logging level
logger = logging.getLogger('nativedicom')
logger.addHandler(logging.NullHandler())

debugging: bool


def debug(debug_on: bool = True, default_handler: bool = True) -> None:
    """Turn on/off debugging of Native DICOM Model reading and writing.

    When debugging is on, the documents read and written and the number of
    attributes found in them are logged to the 'nativedicom' logger using
    Python's :mod:`logging` module.

    Parameters
    ----------
    debug_on : bool, optional
        If ``True`` (default) then turn on debugging, ``False`` to turn off.
    default_handler : bool, optional
        If ``True`` (default) then use :class:`logging.StreamHandler` as the
        handler for log messages.
    """
    global logger, debugging

    if default_handler:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if debug_on:
        logger.setLevel(logging.DEBUG)
        debugging = True
    else:
        logger.setLevel(logging.WARNING)
        debugging = False


# force level=WARNING, in case logging default is set differently
debug(False, False)
