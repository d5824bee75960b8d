import logging
from typing import Optional

from fastapi import FastAPI, Header, HTTPException

from handlers.handlers import Handlers
from utils.config import LOG_LEVEL
from utils.utils import configure_logging, parse_bearer_token

configure_logging(level=getattr(logging, LOG_LEVEL, logging.INFO))

# ---------- APP ----------
app = FastAPI()
handlers = Handlers()


def _require_token(authorization):
    token = parse_bearer_token(authorization)
    if not token:
        raise HTTPException(
            status_code=401,
            detail="Falta el header Authorization: Bearer <token>",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token


# ---------- ROUTES ----------
@app.get("/playlists")
def playlists(authorization: Optional[str] = Header(None)):
    result = handlers.get_playlists(_require_token(authorization))
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.error)
    return {"items": result.items}


@app.get("/playlists/{playlist_id}/tracks")
def playlist_tracks(playlist_id: str, authorization: Optional[str] = Header(None)):
    result = handlers.get_playlist_tracks(playlist_id, _require_token(authorization))
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.error)
    return {"items": result.items}
