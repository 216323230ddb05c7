from typing import List
import argparse
import logging

logger = logging.getLogger(__name__)

from pydantic import TypeAdapter

from network.planq.join.resolve.engine import (
    DEFAULT_NATIVE_SCHEME,
    ResolutionOutcome,
    ResolveOptions,
    resolve,
)
from network.planq.join.resolve.names import load_display_names

outcome_adapter: TypeAdapter = TypeAdapter(ResolutionOutcome)


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="resolve", description="Resolve deep-link paths")
    parser.add_argument("path", nargs="+", help="The path(s) to resolve.")
    parser.add_argument(
        "--native-scheme",
        default=DEFAULT_NATIVE_SCHEME,
        help="The URI scheme of the native app.",
    )
    parser.add_argument(
        "--display-names",
        default=None,
        help="JSON file of display names to use instead of the bundled table.",
    )

    args = vars(parser.parse_args(argv))

    paths: List[str] = args.get("path", [])
    options = ResolveOptions(
        native_scheme=args.get("native_scheme"),
        display_names=load_display_names(args.get("display_names")),
    )

    for path in paths:
        try:
            outcome = resolve(path, options)
            print(outcome_adapter.dump_json(outcome).decode())
        except Exception:
            logging.exception("Exception resolving path %s", path)


if __name__ == "__main__":
    main()
