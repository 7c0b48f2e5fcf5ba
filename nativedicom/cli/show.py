# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""nativedicom command line interface program for `nativedicom show`"""

import argparse

from nativedicom.cli.main import filespec_help, filespec_parser
from nativedicom.valuerep import ValueKind


def add_subparser(subparsers: argparse._SubParsersAction) -> None:
    subparser = subparsers.add_parser(
        "show", description="Display all or part of a Native DICOM Model file"
    )
    subparser.add_argument(
        "filespec",
        help=filespec_help,
        type=filespec_parser
    )
    subparser.add_argument(
        "-x",
        "--exclude-private",
        help="Don't show private attributes",
        action="store_true",
    )
    subparser.add_argument(
        "-t", "--top", help="Only show top level", action="store_true"
    )

    subparser.set_defaults(func=do_command)


def do_command(args: argparse.Namespace) -> None:
    model, attribute = args.filespec
    if attribute is not None:
        if attribute.value_kind is ValueKind.ITEM and not args.top:
            print(attribute)
            for item in attribute.get_items():
                print(f"Item {item.number}:")
                print(item.dataset._pretty_str(indent=1))
        else:
            print(str(attribute))
        return

    ds = model.dataset
    if args.exclude_private:
        ds = ds.without_private_tags()

    if args.top:
        print(ds.top())
    else:
        print(str(ds))