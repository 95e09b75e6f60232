"""Word Ladder Solver.

Finds a shortest sequence of dictionary words leading from one word to another,
changing a single letter at each step.  Words are packed into integers and the
search runs breadth-first over an implicit graph whose edges are computed on
demand.
"""

import argparse
import sys
from pathlib import Path
from time import time

from wordladder.config import config as ladder_config
from wordladder.errors import LadderError
from wordladder.graph import LadderResult, WordGraph
from wordladder.util import format_ladder, int_comma, time_str
from wordladder.word import Word
from wordladder.wordlist import load_graph

__all__ = ["LadderResult", "Word", "WordGraph", "main"]


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordladder",
        description="Finding ladders between words.",
    )
    parser.add_argument(
        "words_input",
        type=Path,
        help="Path to the word dictionary (one word per line)",
    )
    parser.add_argument("origin", help="Origin of the ladder")
    parser.add_argument("target", help="Target of the ladder")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=ladder_config.verbose,
        help="Print progress messages to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the word ladder solver.

    Prints the ladder and returns the process exit status.
    """
    args = get_parser().parse_args(argv)
    start_time = time()

    def log(msg: str) -> None:
        if args.verbose:
            print(msg, file=sys.stderr, flush=True)

    try:
        origin = Word.from_str(args.origin)
        target = Word.from_str(args.target)
        # Words of any other length can never be on a ladder starting at origin
        graph, rejected = load_graph(args.words_input, length=len(args.origin))
    except LadderError as e:
        print(f"Error: {e}", file=sys.stderr, flush=True)
        return 1

    log(
        f"Loaded {int_comma(len(graph))} words of length {len(args.origin)} "
        f"from {args.words_input}"
    )
    if rejected:
        log(f"Skipped {int_comma(len(rejected))} words that could not be encoded")

    result = graph.find_ladder(origin, target)
    if result.status == "found":
        log(f"Found a ladder of {len(result.words)} words")
    elif result.status == "word_not_found":
        log(f"Not in dictionary: {', '.join(str(w) for w in result.missing)}")
    else:
        log(f"No ladder exists between {origin} and {target}")
    log(f"Time taken: {time_str(time() - start_time)}")

    print(format_ladder(result.words))
    return 0
