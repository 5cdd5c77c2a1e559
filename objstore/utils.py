import logging
import pathlib
from argparse import ArgumentParser


def get_parser():
    parser = ArgumentParser(prog="objstore")
    parser.add_argument(
        "-C", "--root", type=pathlib.Path, default=pathlib.Path("."),
        help="store root (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # init
    _init_parser = subparsers.add_parser("init")

    # hash-object
    hash_object_parser = subparsers.add_parser("hash-object")
    hash_object_parser.add_argument("path", type=pathlib.Path)
    hash_object_parser.add_argument("-w", "--write", action="store_true")

    # write-tree
    write_tree_parser = subparsers.add_parser("write-tree")
    write_tree_parser.add_argument("directory", type=pathlib.Path, nargs="?")

    return parser


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
