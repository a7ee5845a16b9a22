from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol, Set, Union

from wordfreq import zipf_frequency

from . import config

logger = logging.getLogger(__name__)

# English word check used to decide whether a submission is a real word.
# Words are looked up in an explicit set first, then in wordfreq's English
# frequency list. Any object with an `is_word` method can stand in for it.


class DictionaryOracle(Protocol):
    def is_word(self, word: str) -> bool: ...


class DictionaryService:
    def __init__(
        self,
        words: Optional[Iterable[str]] = None,
        min_zipf: Optional[float] = None,
        lang: str = config.DICTIONARY_LANGUAGE,
    ):
        # Store lowercase words
        self._words: Set[str] = {w.strip().lower() for w in (words or ()) if w.strip()}
        # None disables the frequency lookup
        self.min_zipf = min_zipf
        self.lang = lang

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'DictionaryService':
        path = Path(path)
        with path.open('r', encoding='utf-8') as f:
            service = cls(line for line in f if not line.startswith('#'))
        logger.info("Loaded %s dictionary words from %s", len(service), path)
        return service

    def is_word(self, word: str) -> bool:
        if not word:
            return False
        w = word.strip().lower()
        if w in self._words:
            return True
        if self.min_zipf is None or not w.isalpha():
            return False
        return zipf_frequency(w, self.lang) >= self.min_zipf

    @property
    def source(self) -> str:
        if self.min_zipf is None:
            return f"wordlist:{len(self._words)}"
        return f"wordfreq:{self.lang}>={self.min_zipf}"

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_word(word)


def load_default() -> DictionaryService:
    if config.DICTIONARY_PATH is not None:
        return DictionaryService.from_file(config.DICTIONARY_PATH)
    service = DictionaryService(min_zipf=config.DICTIONARY_MIN_ZIPF)
    logger.info("Using %s for dictionary lookups", service.source)
    return service
