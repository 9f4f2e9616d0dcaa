"""A five-letter word guessing game with a graphical window and a terminal mode."""

__version__ = "0.1.0"