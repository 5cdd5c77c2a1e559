import pathlib
from argparse import Namespace

import pytest

from objstore.utils import get_parser

ROOT = pathlib.Path(".")


@pytest.mark.parametrize(
    "params, expected",
    [
        (["init"], Namespace(root=ROOT, verbose=False, command="init")),
        (
            ["hash-object", "some_file.txt"],
            Namespace(
                root=ROOT,
                verbose=False,
                command="hash-object",
                path=pathlib.Path("some_file.txt"),
                write=False,
            ),
        ),
        (
            ["-v", "hash-object", "-w", "some_file.txt"],
            Namespace(
                root=ROOT,
                verbose=True,
                command="hash-object",
                path=pathlib.Path("some_file.txt"),
                write=True,
            ),
        ),
        (
            ["write-tree"],
            Namespace(root=ROOT, verbose=False, command="write-tree", directory=None),
        ),
        (
            ["-C", "/tmp/store", "write-tree", "src"],
            Namespace(
                root=pathlib.Path("/tmp/store"),
                verbose=False,
                command="write-tree",
                directory=pathlib.Path("src"),
            ),
        ),
    ],
)
def test_parser(params, expected):
    parser = get_parser()
    args = parser.parse_args(params)
    assert args == expected


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        get_parser().parse_args([])
