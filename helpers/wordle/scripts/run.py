from argparse import ArgumentParser
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console

from helpers.wordle.config import HelperConfig, Language, load_config
from helpers.wordle.session import Runner


def main() -> None:
    parser = ArgumentParser(description="Lists the words still consistent with your Wordle guesses")
    parser.add_argument("--config", type=str, default=None, help="JSON file with helper settings")
    parser.add_argument(
        "--lang",
        type=Language,
        choices=list(Language),
        default=None,
        help="Language of the game being played",
    )
    parser.add_argument(
        "--dictionary_dir",
        type=Path,
        default=None,
        help="Directory containing dictionary_<lang>.txt files",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for greetings")
    parser.add_argument("--no_color", action="store_true", default=False, help="Disable colored output")
    parser.add_argument("--verbose", action="store_true", default=False, help="Log debug messages to stderr")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args.config) if args.config is not None else HelperConfig()
    except (OSError, ValidationError) as e:
        parser.error(f"Invalid config {args.config}: {e}")

    overrides = {}
    if args.lang is not None:
        overrides["lang"] = args.lang
    if args.dictionary_dir is not None:
        overrides["dictionary_dir"] = args.dictionary_dir
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.no_color:
        overrides["color"] = False
    config = config.model_copy(update=overrides)

    console = Console(no_color=not config.color)
    Runner(config=config, console=console).run()


if __name__ == "__main__":
    main()
