"""qlparse CLI — qlparse check, qlparse dump, qlparse fmt."""
import sys
import os

from qlparse.config import get_config
from qlparse.errors import QlError
from qlparse.logger import setup_logging
from qlparse.parser import parse_query
from qlparse.printer import format_query


def main():
    if len(sys.argv) < 2:
        print("Usage: qlparse <command> [file]", file=sys.stderr)
        print("Commands: check, dump, fmt", file=sys.stderr)
        sys.exit(1)

    command = sys.argv[1]

    if command in ("check", "dump", "fmt"):
        if len(sys.argv) < 3:
            print(f"Usage: qlparse {command} <file>", file=sys.stderr)
            sys.exit(1)
        filepath = sys.argv[2]
        if not os.path.exists(filepath):
            print(f"Error: file not found: {filepath}", file=sys.stderr)
            sys.exit(1)
        with open(filepath) as f:
            source = f.read()

        try:
            setup_logging()
            config = get_config()

            tree = parse_query(source)

            if command == "check":
                print(f"OK: {filepath}")
                sys.exit(0)

            if command == "dump":
                print(repr(tree))
                sys.exit(0)

            if command == "fmt":
                print(format_query(
                    tree,
                    indent=config["format"]["indent"],
                    separator=config["format"]["separator"],
                ), end="")
                sys.exit(0)

        except QlError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(f"Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
