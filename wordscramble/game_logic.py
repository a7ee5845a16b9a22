from __future__ import annotations
import logging
import random
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Collection, List, Optional, Sequence

from . import config

logger = logging.getLogger(__name__)


class RejectionReason(str, Enum):
    TOO_SHORT = 'TooShort'
    IS_ROOT_WORD = 'IsRootWord'
    ALREADY_USED = 'AlreadyUsed'
    NOT_SUBSEQUENCE = 'NotSubsequence'
    NOT_IN_DICTIONARY = 'NotInDictionary'


# (title, message) shown to the player; '{root}' is filled with the root word
REJECTION_TEXT = {
    RejectionReason.TOO_SHORT: ('Word too short', 'The word should be at least {min_length} letters'),
    RejectionReason.IS_ROOT_WORD: ('Word is the start word', 'Be more original'),
    RejectionReason.ALREADY_USED: ('Word used already', 'Be more original'),
    RejectionReason.NOT_SUBSEQUENCE: ('Word not possible', "You can't spell that word from '{root}'!"),
    RejectionReason.NOT_IN_DICTIONARY: ('Word not recognized', "You can't just make them up, you know!"),
}


@dataclass(frozen=True)
class ValidationResult:
    word: str
    reason: Optional[RejectionReason] = None
    title: Optional[str] = None
    message: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @classmethod
    def accept(cls, word: str) -> 'ValidationResult':
        return cls(word=word)

    @classmethod
    def reject(cls, word: str, reason: RejectionReason, root_word: str,
               min_length: int = config.MIN_WORD_LENGTH) -> 'ValidationResult':
        title, message = REJECTION_TEXT[reason]
        return cls(
            word=word,
            reason=reason,
            title=title,
            message=message.format(root=root_word, min_length=min_length),
        )


def normalize(candidate: str) -> str:
    return candidate.strip().lower()


def is_original(word: str, used_words: Collection[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """True if `word` can be spelled with the letters of `root_word`, each used at most once."""
    available = Counter(root_word)
    for letter in word:
        if available[letter] <= 0:
            return False
        available[letter] -= 1
    return True


def validate(
    candidate: str,
    root_word: str,
    used_words: Collection[str],
    is_dictionary_word: Callable[[str], bool],
    min_length: int = config.MIN_WORD_LENGTH,
) -> ValidationResult:
    """
    Run the word rules in order and report the first one that fails.

    The checks never touch `used_words`; recording an accepted word is the
    caller's job.
    """
    word = normalize(candidate)

    if len(word) < min_length:
        return ValidationResult.reject(word, RejectionReason.TOO_SHORT, root_word, min_length)
    if word == root_word:
        return ValidationResult.reject(word, RejectionReason.IS_ROOT_WORD, root_word, min_length)
    if not is_original(word, used_words):
        return ValidationResult.reject(word, RejectionReason.ALREADY_USED, root_word, min_length)
    if not is_possible(word, root_word):
        return ValidationResult.reject(word, RejectionReason.NOT_SUBSEQUENCE, root_word, min_length)
    if not is_dictionary_word(word):
        return ValidationResult.reject(word, RejectionReason.NOT_IN_DICTIONARY, root_word, min_length)
    return ValidationResult.accept(word)


def clean_word_list(word_list: Sequence[str]) -> List[str]:
    return [w.strip().lower() for w in word_list if w and w.strip()]


@dataclass
class Score:
    word: str
    score: int


class Session:
    def __init__(
        self,
        word_list: Sequence[str],
        is_dictionary_word: Callable[[str], bool],
        rng: Optional[random.Random] = None,
        min_length: int = config.MIN_WORD_LENGTH,
    ):
        self.word_list = clean_word_list(word_list)
        self.is_dictionary_word = is_dictionary_word
        self.rng = rng or random.Random()
        self.min_length = min_length
        self.used_words: List[str] = []  # most recent first
        self.scores: List[Score] = []
        self.root_word = self.start_game()

    def start_game(self, word_list: Optional[Sequence[str]] = None) -> str:
        if word_list is not None:
            self.word_list = clean_word_list(word_list)
        if self.word_list:
            self.root_word = self.rng.choice(self.word_list)
        else:
            self.root_word = config.FALLBACK_ROOT_WORD
        return self.root_word

    def submit(self, candidate: str) -> ValidationResult:
        result = validate(candidate, self.root_word, self.used_words, self.is_dictionary_word, self.min_length)
        if result.accepted:
            self.used_words.insert(0, result.word)
        else:
            logger.debug("Rejected %r for root %r: %s", result.word, self.root_word, result.reason.value)
        return result

    def restart(self) -> str:
        self.scores.append(Score(word=self.root_word, score=len(self.used_words)))
        self.start_game()
        self.used_words = []
        return self.root_word
