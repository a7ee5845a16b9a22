from __future__ import annotations
import logging

import socketio
from socketio.exceptions import ConnectionRefusedError as ConnectionRefused
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from . import config
from .dictionary import load_default
from .errors import TooManySessions, UnknownSession, WordListUnavailable
from .managers.game import SessionManager
from .schemas import Health, ScoreSheet, SessionState, SubmissionResponse, SubmitWord
from .wordlist import load_start_words

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

# The game cannot produce a root word without its start list
try:
    start_words = load_start_words(config.START_WORDS_PATH)
except WordListUnavailable as exc:
    logger.critical("%s", exc)
    raise SystemExit(1) from exc

try:
    dictionary = load_default()
except OSError as exc:
    logger.critical("Could not load dictionary from %s: %s", config.DICTIONARY_PATH, exc)
    raise SystemExit(1) from exc

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=config.CORS_ORIGINS)
app = FastAPI(title="Word Scramble Server", version="0.1.0")

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

games = SessionManager(sio, start_words, dictionary.is_word)

@app.exception_handler(UnknownSession)
async def unknown_session(request: Request, exc: UnknownSession):
    return JSONResponse(status_code=404, content={'detail': str(exc)})

@app.exception_handler(TooManySessions)
async def too_many_sessions(request: Request, exc: TooManySessions):
    return JSONResponse(status_code=503, content={'detail': str(exc)})

# REST Endpoints
@app.get('/health')
async def health() -> Health:
    return Health(startWords=len(games.word_list), dictionary=dictionary.source)

@app.post('/sessions', status_code=201)
async def create_session() -> SessionState:
    session_id = games.create()
    return games.to_state(session_id)

@app.get('/sessions/{session_id}')
async def get_session(session_id: str) -> SessionState:
    return games.to_state(session_id)

@app.post('/sessions/{session_id}/words')
async def submit_word(session_id: str, body: SubmitWord) -> SubmissionResponse:
    result = await games.submit(session_id, body.word)
    return SubmissionResponse(result=result, state=games.to_state(session_id))

@app.post('/sessions/{session_id}/restart')
async def restart_session(session_id: str) -> SessionState:
    return await games.restart(session_id)

@app.get('/sessions/{session_id}/scores')
async def get_scores(session_id: str) -> ScoreSheet:
    return ScoreSheet(scores=games.scores(session_id))

@app.delete('/sessions/{session_id}', status_code=204)
async def delete_session(session_id: str):
    if not games.drop(session_id):
        raise UnknownSession(session_id)

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    try:
        games.create(sid, live=True)
    except TooManySessions as exc:
        raise ConnectionRefused(str(exc))
    await games.announce(sid)

@sio.event
async def disconnect(sid, reason=None):
    games.drop(sid)

async def _emit_error(sid, message: str):
    await sio.emit('game:error', {'message': message}, to=sid)

@sio.on('game:state')
async def game_state(sid):
    try:
        await sio.emit('game:state', games.to_state(sid).model_dump(), to=sid)
    except UnknownSession as exc:
        await _emit_error(sid, str(exc))

@sio.on('game:submit')
async def game_submit(sid, payload):
    # Clients send either {"word": "..."} or the bare string
    try:
        word = SubmitWord.model_validate({'word': payload} if isinstance(payload, str) else payload).word
    except ValidationError:
        await _emit_error(sid, 'Expected {"word": <string of at most 64 characters>}')
        return None
    try:
        result = await games.submit(sid, word)
    except UnknownSession as exc:
        await _emit_error(sid, str(exc))
        return None
    # Returned value is delivered to the client's ack callback
    return result.model_dump()

@sio.on('game:restart')
async def game_restart(sid):
    try:
        await games.restart(sid)
    except UnknownSession as exc:
        await _emit_error(sid, str(exc))

@sio.on('game:scores')
async def game_scores(sid):
    try:
        sheet = ScoreSheet(scores=games.scores(sid))
    except UnknownSession as exc:
        await _emit_error(sid, str(exc))
        return
    await sio.emit('game:scores', sheet.model_dump(), to=sid)

# Export ASGI app for uvicorn
application = asgi_app

def run():
    import uvicorn

    uvicorn.run(application, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())

# For local running: uvicorn wordscramble.main:application --reload --host 0.0.0.0 --port 8000
