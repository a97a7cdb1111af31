"""
Hangman game for the widget menu.
"""

import random
from enum import Enum
from typing import Optional, Set

from .config import WidgetConfig


class HangmanStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GuessResult(Enum):
    HIT = "hit"
    MISS = "miss"
    REPEATED = "repeated"
    INVALID = "invalid"
    GAME_OVER = "game_over"


class HangmanGame:
    """
    One round of hangman.

    Repeated or non-letter guesses are refused without costing a life.
    """

    def __init__(
        self,
        word: Optional[str] = None,
        config: Optional[WidgetConfig] = None,
        rng: Optional[random.Random] = None
    ):
        self.config = config or WidgetConfig()
        self.rng = rng or random.Random()
        self.word = (word or self.rng.choice(self.config.HANGMAN_WORDS)).lower()
        self.max_misses = self.config.HANGMAN_MAX_MISSES
        self.guessed: Set[str] = set()
        self.misses = 0

    @property
    def status(self) -> HangmanStatus:
        if all(letter in self.guessed for letter in self.word):
            return HangmanStatus.WON
        if self.misses >= self.max_misses:
            return HangmanStatus.LOST
        return HangmanStatus.PLAYING

    @property
    def remaining(self) -> int:
        return self.max_misses - self.misses

    @property
    def masked_word(self) -> str:
        return " ".join(c if c in self.guessed else "_" for c in self.word)

    @property
    def wrong_letters(self) -> str:
        return ", ".join(sorted(c for c in self.guessed if c not in self.word))

    def guess(self, letter: str) -> GuessResult:
        """Guess one letter."""
        if self.status != HangmanStatus.PLAYING:
            return GuessResult.GAME_OVER

        letter = (letter or "").strip().lower()
        if len(letter) != 1 or not letter.isalpha():
            return GuessResult.INVALID
        if letter in self.guessed:
            return GuessResult.REPEATED

        self.guessed.add(letter)
        if letter in self.word:
            return GuessResult.HIT

        self.misses += 1
        return GuessResult.MISS

    def status_text(self) -> str:
        status = self.status
        if status == HangmanStatus.WON:
            return f"You guessed it: {self.word}!"
        if status == HangmanStatus.LOST:
            return f"Out of guesses! The word was {self.word}."
        return f"{self.remaining} guesses left"
