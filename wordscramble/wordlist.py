from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Union

from .errors import WordListUnavailable

logger = logging.getLogger(__name__)


def load_start_words(path: Union[str, Path]) -> List[str]:
    """
    Read the root word list: UTF-8 text, one word per line.

    Lines are stripped and lowercased; blank lines are dropped. An empty
    result is returned as-is (sessions then fall back to a fixed root word),
    but a missing or unreadable file raises WordListUnavailable.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListUnavailable(path, str(exc)) from exc

    words = [line.strip().lower() for line in text.splitlines() if line.strip()]
    logger.info("Loaded %s start words from %s", len(words), path)
    return words
