from __future__ import annotations
import logging
import random
import time
import uuid
from typing import Callable, Dict, List, Optional, Sequence, Set

from .. import config
from ..errors import TooManySessions, UnknownSession
from ..game_logic import Session, ValidationResult
from ..schemas import Score, SessionState, SubmissionResult, UsedWord

logger = logging.getLogger(__name__)


def to_result(result: ValidationResult) -> SubmissionResult:
    return SubmissionResult(
        word=result.word,
        accepted=result.accepted,
        reason=result.reason.value if result.reason else None,
        title=result.title,
        message=result.message,
    )


class SessionManager:
    """
    One game session per client id.

    Sessions created for a Socket.IO connection are "live": every state change
    is pushed to that client and the session ends on disconnect. REST sessions
    only answer the request; they expire after `ttl` seconds without use.
    """

    def __init__(
        self,
        sio,
        word_list: Sequence[str],
        is_dictionary_word: Callable[[str], bool],
        rng: Optional[random.Random] = None,
        min_length: int = config.MIN_WORD_LENGTH,
        ttl: float = config.SESSION_TTL,
        max_sessions: int = config.MAX_SESSIONS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.sio = sio
        self.word_list = list(word_list)
        self.is_dictionary_word = is_dictionary_word
        self.rng = rng or random.Random()
        self.min_length = min_length
        self.sessions: Dict[str, Session] = {}
        self.live: Set[str] = set()
        self.ttl = ttl
        self.max_sessions = max_sessions
        self.clock = clock
        self.last_seen: Dict[str, float] = {}

    def create(self, session_id: Optional[str] = None, live: bool = False) -> str:
        self.expire()
        if len(self.sessions) >= self.max_sessions:
            raise TooManySessions(self.max_sessions)
        session_id = session_id or uuid.uuid4().hex
        session = Session(self.word_list, self.is_dictionary_word, rng=self.rng, min_length=self.min_length)
        self.sessions[session_id] = session
        self.last_seen[session_id] = self.clock()
        if live:
            self.live.add(session_id)
        logger.info("Session %s started with root word %r", session_id, session.root_word)
        return session_id

    def get(self, session_id: str) -> Session:
        session = self.sessions.get(session_id)
        if session is None:
            raise UnknownSession(session_id)
        self.last_seen[session_id] = self.clock()
        return session

    def drop(self, session_id: str) -> bool:
        self.live.discard(session_id)
        self.last_seen.pop(session_id, None)
        session = self.sessions.pop(session_id, None)
        if session is not None:
            logger.info("Session %s closed", session_id)
        return session is not None

    def expire(self) -> int:
        """Drop REST sessions idle for longer than the ttl; returns how many were dropped."""
        cutoff = self.clock() - self.ttl
        stale = [sid for sid, seen in self.last_seen.items() if seen < cutoff and sid not in self.live]
        for sid in stale:
            self.drop(sid)
        if stale:
            logger.info("Expired %s idle sessions", len(stale))
        return len(stale)

    def to_state(self, session_id: str) -> SessionState:
        session = self.get(session_id)
        return SessionState(
            id=session_id,
            rootWord=session.root_word,
            usedWords=[UsedWord(word=w, length=len(w)) for w in session.used_words],
            wordCount=len(session.used_words),
            scores=[Score(word=s.word, score=s.score) for s in session.scores],
        )

    def scores(self, session_id: str) -> List[Score]:
        return [Score(word=s.word, score=s.score) for s in self.get(session_id).scores]

    async def announce(self, session_id: str):
        if session_id in self.live:
            await self.sio.emit('game:state', self.to_state(session_id).model_dump(), to=session_id)

    async def submit(self, session_id: str, word: str) -> SubmissionResult:
        session = self.get(session_id)
        result = to_result(session.submit(word))
        if result.accepted:
            await self.announce(session_id)
        elif session_id in self.live:
            await self.sio.emit('game:wordRejected', result.model_dump(), to=session_id)
        return result

    async def restart(self, session_id: str) -> SessionState:
        session = self.get(session_id)
        previous = session.root_word
        session.restart()
        logger.info("Session %s restarted: %r -> %r", session_id, previous, session.root_word)
        await self.announce(session_id)
        return self.to_state(session_id)
