# apps/cli/play.py
"""
Interactive Absurdle in the terminal.

The adversary answers every guess with the clue that keeps the most words
alive; you win by naming the last word standing.

Usage:
    python -m apps.cli.play --dictionary words.txt --length 5
    python -m apps.cli.play --dictionary words.txt --length 5 --strict --show-words 10
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable, List, Optional, Tuple

from packages.absurdle import AbsurdleManager, InvalidArgumentError, InvalidStateError
from packages.datasets import load_dictionary
from packages.engine import guess_problem, is_solved


def play_game(
        manager: AbsurdleManager,
        guesses: Iterable[str],
        *,
        allowed: Optional[set] = None,
        show_words: int = 0,
        out: Callable[[str], None] = print,
) -> List[Tuple[str, str]]:
    """
    Drive one game from an iterable of typed lines until solved or input ends.

    Bad input (wrong length, non-letters, or unknown word when `allowed` is
    given) is reported and skipped. Returns the (guess, pattern) history.
    """
    N = manager.length
    history: List[Tuple[str, str]] = []

    for raw in guesses:
        guess = raw.strip().lower()
        if not guess:
            continue

        problem = guess_problem(guess, N, allowed)
        if problem:
            out(f"  {problem}")
            continue

        patt = manager.record(guess)
        history.append((guess, patt))
        left = len(manager.words())
        out(f"{guess}  {patt}  ({left} word{'s' if left != 1 else ''} left)")

        if is_solved(patt):
            out(f"Absurdle solved in {len(history)} guess{'es' if len(history) != 1 else ''}!")
            return history

        if show_words and left <= show_words:
            out("  " + ", ".join(sorted(manager.words())))

    return history


def _prompt_lines(N: int) -> Iterable[str]:
    while True:
        try:
            yield input(f"guess ({N} letters)> ")
        except EOFError:
            return


def main():
    ap = argparse.ArgumentParser(description="absurdle — play against the adversary")
    ap.add_argument("--dictionary", required=True, help="path to word list (one word per line)")
    ap.add_argument("--length", type=int, default=5, help="word length")
    ap.add_argument("--strict", action="store_true",
                    help="only accept guesses found in the dictionary")
    ap.add_argument("--show-words", type=int, default=0,
                    help="list the surviving words once at most this many remain")
    ap.add_argument("--verbose", action="store_true", help="log adversary decisions (DEBUG)")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        dictionary = load_dictionary(args.dictionary)
    except FileNotFoundError as e:
        raise SystemExit(f"dictionary not found: {e}")

    try:
        manager = AbsurdleManager(dictionary, args.length)
    except InvalidArgumentError as e:
        raise SystemExit(str(e))

    if not manager.words():
        sys.stderr.write(f"no {args.length}-letter words in {args.dictionary}\n")
        sys.exit(1)

    print(f"Absurdle: {len(manager.words())} possible {args.length}-letter words. Good luck.")
    allowed = set(dictionary) if args.strict else None

    try:
        history = play_game(manager, _prompt_lines(args.length),
                            allowed=allowed, show_words=args.show_words)
    except InvalidStateError as e:
        sys.stderr.write(f"game over: {e}\n")
        sys.exit(1)

    if not history or not is_solved(history[-1][1]):
        print(f"\nStopped after {len(history)} guess(es); {len(manager.words())} word(s) remain.")


if __name__ == "__main__":
    main()
