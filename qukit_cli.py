# qukit_cli.py

"""
qukit Command-Line Interface (CLI)

Regenerates the gate bindings from the catalog, lists them, and checks that
the configured native engine provides every entry point the bindings call.
"""

import argparse
import sys

from qukit.bindgen import expand_catalog, generate
from qukit.engine import load_engine, missing_entry_points
from qukit.errors import QukitError


def run_generate() -> int:
    paths = generate()
    print(f"--> Wrote {len(paths)} files to {paths[-1].parent}")
    return 0


def run_list() -> int:
    artifacts = expand_catalog()
    width = max(len(a.function_name) for a in artifacts)
    for a in artifacts:
        print(f"{a.function_name.ljust(width)}  {a.artifact_name}")
    return 0


def run_check_engine() -> int:
    engine = load_engine()
    print(f"--> Loaded engine '{getattr(engine, '__name__', engine)}'.")
    missing = missing_entry_points(engine)
    if missing:
        print(f"--> Missing {len(missing)} entry point(s):")
        for verb in missing:
            print(f"    {verb}")
        return 1
    print("--> All entry points present.")
    return 0


COMMANDS = {
    "generate": run_generate,
    "list": run_list,
    "check-engine": run_check_engine,
}


def main(argv=None) -> int:
    """Parses arguments and runs the selected command."""
    parser = argparse.ArgumentParser(
        prog="qukit",
        description="Generate and inspect the qukit gate bindings.",
    )
    parser.add_argument(
        "command",
        choices=list(COMMANDS),
        help="The command to execute.",
    )
    args = parser.parse_args(argv)

    try:
        return COMMANDS[args.command]()
    except QukitError as e:
        print(f"\n[ERROR] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
