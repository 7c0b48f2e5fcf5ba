# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""nativedicom command line interface program

Each subcommand is a module within nativedicom.cli, which
defines an add_subparser(subparsers) function to set argparse
attributes, and does a  set_defaults(func=callback_function)

"""

import argparse
import os
from typing import List, Optional, Tuple
from xml.etree.ElementTree import ParseError

from nativedicom.dataelem import DicomAttribute
from nativedicom.errors import InvalidNativeModelError
from nativedicom.filereader import xmlread
from nativedicom.model import NativeDicomModel
from nativedicom.tag import Tag

subparsers: Optional[argparse._SubParsersAction] = None


filespec_help = (
    "filename[:tag]\n"
    "Native DICOM Model XML file and optional top-level attribute in it.\n"
    "Examples:\n"
    "   path/to/your_file.xml\n"
    "   path/to/your_file.xml:00100010\n"
    "   path/to/your_file.xml:(0010,0010)\n"
)


def filespec_parser(
    filespec: str
) -> Tuple[NativeDicomModel, Optional[DicomAttribute]]:
    """Utility to return a document and an optional attribute within it

    Note: this is used as an argparse 'type' for adding parsing arguments.

    Parameters
    ----------
    filespec: str
        A filename with an optional tag, in format:
            <filename>[:<tag>]

    Returns
    -------
    model: NativeDicomModel
        The entire document read from the file.
    attribute: DicomAttribute or None
        The top-level attribute with the given tag, if one was given.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file does not exist or can't be parsed, if the tag is not a
        valid tag or if the tag is not in the document.
    """
    filename, tag = filespec, ""
    if not os.path.exists(filespec) and ":" in filespec:
        filename, tag = filespec.rsplit(":", 1)

    # Check tag syntax first to avoid unnecessary load of file
    tag_value = None
    if tag:
        try:
            tag_value = Tag(tag)
        except (ValueError, OverflowError):
            raise argparse.ArgumentTypeError(
                f"'{tag}' is not a valid DICOM tag"
            )

    try:
        model = xmlread(filename)
    except FileNotFoundError:
        raise argparse.ArgumentTypeError(f"File '{filename}' not found")
    except (ParseError, InvalidNativeModelError) as e:
        raise argparse.ArgumentTypeError(
            f"Error reading '{filename}': {str(e)}"
        )

    if tag_value is None:
        return model, None

    attribute = model.dataset.get_attribute_by_tag(tag_value)
    if attribute is None:
        raise argparse.ArgumentTypeError(
            f"Tag {tag_value} is not in the document"
        )

    return model, attribute


def help_command(args: argparse.Namespace) -> None:
    subcommands = list(subparsers.choices.keys())  # type: ignore
    if args.subcommand and args.subcommand in subcommands:
        subparsers.choices[args.subcommand].print_help()  # type: ignore
    else:
        print(
            "Use nativedicom help [subcommand] to show help for a subcommand"
        )
        subcommands.remove("help")
        print(f"Available subcommands: {', '.join(subcommands)}")


def get_subcommands():
    from nativedicom.cli import show

    return {"show": show.add_subparser}


def main(args: Optional[List[str]] = None) -> None:
    """Entry point for 'nativedicom' command line interface

    args: list
        Command-line arguments to parse.  If None, then sys.argv is used
    """
    global subparsers

    parser = argparse.ArgumentParser(
        prog="nativedicom",
        description="nativedicom command line utilities"
    )
    subparsers = parser.add_subparsers(help="subcommand help")

    help_parser = subparsers.add_parser(
        "help", help="display help for subcommands"
    )
    help_parser.add_argument(
        "subcommand", nargs="?", help="Subcommand to show help for"
    )
    help_parser.set_defaults(func=help_command)

    # Get subcommands to register themselves as a subparser
    subcommands = get_subcommands()
    for subcommand in subcommands.values():
        subcommand(subparsers)

    ns = parser.parse_args(args)
    if not len(ns.__dict__):
        parser.print_help()
    else:
        ns.func(ns)
