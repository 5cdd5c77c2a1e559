import sys

from objstore.errors import ObjectStoreError
from objstore.models import ObjectStore, to_hex
from objstore.utils import configure_logging, get_parser


def run(args) -> str | None:
    store = ObjectStore(args.root)
    match args.command:
        case "init":
            store.init_store()
            return None
        case "hash-object":
            return to_hex(store.hash_object(args.path, write=args.write))
        case "write-tree":
            return to_hex(store.write_tree(args.directory))
        case _:
            raise RuntimeError(f"Unknown command #{args.command}")


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        hash_value = run(args)
    except ObjectStoreError as e:
        sys.stderr.write(f"objstore: {e}\n")
        return 1
    if hash_value is not None:
        sys.stdout.write(hash_value + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
