# wordlegui

A five-letter word guessing game. Guess the hidden word in six tries. After
each guess, every letter is marked as absent, present elsewhere in the word,
or in the right place.

## Installing

```
pip install .
```

The graphical game needs `pygame`, which is installed along with the package.

## Word lists

Both commands take a word list. A word list is a plain text file with one
five-letter word per line, and it must hold at least ten words. A newline
after the last word is optional. Loading fails when any line, including an
empty line, is not exactly five characters long, or when there are too few
words.

## Playing in a window

```
wordlegui words.txt
```

- Type letters to fill the current row.
- Press Backspace to delete a letter.
- Press Enter to submit the row.

A row that is too short or is not in the list is marked in red, with a
message, and does not count as a try.

On the right, a reference grid shows which letters have been ruled out (red)
and which occur in the word (green). If you win, confetti bursts from the
bottom corners. When the game is over, press Enter to play again.

The first game of a session uses the word of the day. It is picked with the
current UTC date as the random seed, so the same list gives the same first
word all day. Later games pick a word at random.

The window loads its images and font from a `res/` directory in the current
working directory. It needs these three files:

- `chars.bmp`, a strip of 64×64 letter tiles from a to z.
- `confetti.bmp`, a strip of 16×16 confetti pieces.
- `Ubuntu-Regular.ttf`.

### What this package does not provide

The package ships no images and no font. You must supply the `res/` files
yourself. If any of them is missing, `wordlegui` prints
`Failed to run the game: ...` and exits with status 1.

## Playing in a terminal

```
wordle-cli words.txt
```

Guesses are read from standard input, one per line. Everything the game says
goes to standard error:

- Each line read is echoed back.
- A valid guess is answered with five digits, one per letter: `0` absent,
  `1` present elsewhere, `2` in place.
- A line that is not a listed five-letter word is answered with
  `Incorrect word` and does not use up a try.
- After six wrong guesses, the hidden word is shown.

When the word is found, the game ends without a message.

Exit status for both commands:

| Status | Meaning |
| --- | --- |
| 0 | The game ended normally. |
| 1 | Wrong arguments, or the file could not be read. |
| 2 | `wordle-cli` found a badly formed line. |
| 3 | `wordle-cli` found too few words. |

`wordlegui` exits with status 1 for every loading error.

## Using the library

```python
from wordlegui.words import load_word_list, get_feedback, is_in_word_list

words = load_word_list("words.txt")
is_in_word_list(words, "crane")
get_feedback("crane", "react")   # list of LetterState values
```

`load_word_list` raises `OSError`, `InvalidFormatError` or
`NotEnoughWordsError`. The last two are subclasses of `WordListError`.

The main modules:

- `wordlegui.game.GameState` holds a whole game, apart from any display. Its
  methods are `type_letter`, `backspace`, `submit` and `reset`. It keeps the
  `status` (`GameStatus`), the `message` and the letter `reference`
  (`ReferenceMark`).
- `wordlegui.confetti` runs the win animation as plain numbers:
  `spawn_confetti`, `Confetti.advance`, and `WinAnimation` with `start`,
  `step` and `reset`.
- `wordlegui.render` draws a game onto a pygame surface.
- `wordlegui.cli.run_wordle` plays one terminal game on any pair of text
  streams.

Smaller helpers:

- `wordlegui.charclass`: ASCII character tests and case conversion.
- `wordlegui.strings`: `split`, `trim`, `find` and `tokenize`.
- `wordlegui.numbers`: C-style integer and decimal parsing, and small integer
  helpers.
- `wordlegui.compare`: string comparisons, whole, by prefix and by suffix.
- `wordlegui.scan`: reads typed values out of a line by a format such as
  `"%d[0,10] %f"`, and raises `ScanError` on a mismatch.
- `wordlegui.linked_list`: a singly linked `LinkedList`.

## Tests

```
pip install .[test]
pytest
```