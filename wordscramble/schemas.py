from __future__ import annotations
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

RejectionCode = Literal['TooShort', 'IsRootWord', 'AlreadyUsed', 'NotSubsequence', 'NotInDictionary']

class Score(BaseModel):
    word: str
    score: int

class UsedWord(BaseModel):
    word: str
    # letter count, shown next to each word
    length: int

class SessionState(BaseModel):
    id: str
    rootWord: str
    usedWords: List[UsedWord] = []
    wordCount: int = 0
    scores: List[Score] = []

class SubmitWord(BaseModel):
    word: str = Field(..., max_length=64)

class SubmissionResult(BaseModel):
    word: str
    accepted: bool
    reason: Optional[RejectionCode] = None
    title: Optional[str] = None
    message: Optional[str] = None

class SubmissionResponse(BaseModel):
    result: SubmissionResult
    state: SessionState

class ScoreSheet(BaseModel):
    scores: List[Score] = []

class Health(BaseModel):
    status: Literal['ok'] = 'ok'
    startWords: int
    dictionary: str
