"""Terminal version of the game: guesses are read line by line."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Sequence
from typing import TextIO

from wordlegui.words import (
    InvalidFormatError,
    NotEnoughWordsError,
    get_feedback,
    is_in_word_list,
    load_word_list,
    random_word,
)

MAX_GUESSES = 6


def run_wordle(
    words: Sequence[str], target: str, stdin: TextIO, stderr: TextIO
) -> bool | None:
    """Play one game against target.

    Returns True when the word is found, False after six wrong guesses and
    None when the input runs out first.
    """
    made = 0
    while made < MAX_GUESSES:
        word = stdin.readline()
        if not word:
            return None
        stderr.write(f"word : {word}\n")
        if len(word) != 6 or not is_in_word_list(words, word):
            stderr.write("Incorrect word\n")
            continue
        if target[:5] == word[:5]:
            return True
        feedback = get_feedback(word, target)
        stderr.write("".join(str(int(state)) for state in feedback) + "\n")
        made += 1
    stderr.write(f'You lose, the word was : "{target}"\n')
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Load the word list named on the command line and play a game."""
    args = list(sys.argv[1:] if argv is None else argv)
    rng = random.Random(int(time.time()))
    if len(args) != 1:
        sys.stderr.write("Usage: ./wordle [word list]\n")
        return 1
    try:
        words = load_word_list(args[0])
    except OSError as exc:
        sys.stderr.write(f"Error: {exc.strerror or exc}\n")
        return 1
    except InvalidFormatError:
        sys.stderr.write("Error: One or more word size different than 5\n")
        return 2
    except NotEnoughWordsError:
        sys.stderr.write("Error: Less than 10 word present in given file\n")
        return 3
    run_wordle(words, random_word(words, rng), sys.stdin, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())