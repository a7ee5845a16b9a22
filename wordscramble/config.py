from __future__ import annotations
import os
from pathlib import Path
from typing import List, Optional

# Runtime settings. Environment overrides are read once at import.

DATA_DIR = Path(__file__).parent / 'data'

START_WORDS_PATH = Path(os.environ.get('WORDSCRAMBLE_START_WORDS', DATA_DIR / 'start.txt'))

# A word file replaces the wordfreq lookup when set
_dictionary_env = os.environ.get('WORDSCRAMBLE_DICTIONARY')
DICTIONARY_PATH: Optional[Path] = Path(_dictionary_env) if _dictionary_env else None
DICTIONARY_LANGUAGE = 'en'
# Zipf scale: 1 is once per 100M words, 3 once per 1M
DICTIONARY_MIN_ZIPF = float(os.environ.get('WORDSCRAMBLE_MIN_ZIPF', '2.0'))

MIN_WORD_LENGTH = int(os.environ.get('WORDSCRAMBLE_MIN_LENGTH', '3'))

# Used when the start word file loads but holds no words
FALLBACK_ROOT_WORD = 'silkworm'

# REST sessions idle longer than this are discarded (seconds)
SESSION_TTL = float(os.environ.get('WORDSCRAMBLE_SESSION_TTL', '3600'))
MAX_SESSIONS = int(os.environ.get('WORDSCRAMBLE_MAX_SESSIONS', '10000'))

LOG_LEVEL = os.environ.get('WORDSCRAMBLE_LOG_LEVEL', 'INFO').upper()

CORS_ORIGINS: List[str] = [
    o.strip() for o in os.environ.get('WORDSCRAMBLE_CORS_ORIGINS', '*').split(',') if o.strip()
]

HOST = os.environ.get('WORDSCRAMBLE_HOST', '0.0.0.0')
PORT = int(os.environ.get('WORDSCRAMBLE_PORT', '8000'))
