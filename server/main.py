"""FastAPI web server exposing the NMEA decoder.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

``POST /sentences`` decodes one sentence per request with a fresh parser.
WebSocket clients connect to ``ws://<host>:8000/ws`` and send one sentence
per text frame; each connection keeps its own parser, so a GSV group sent
sentence by sentence accumulates into one satellite list. Every frame is
answered with one JSON message, ``type="snapshot"`` or ``type="error"``.
"""

import asyncio
import logging
from typing import Any

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from pydantic import BaseModel

from navnmea import NMEAParser
from navnmea.nmea.errors import NMEAError
from server.formatters import (
    error_kind,
    format_error_message,
    format_snapshot_message,
    snapshot_to_dict,
)

logger = logging.getLogger(__name__)

_TIMEOUT_SECONDS = 30.0
_IDLE_CLOSE_CODE = 1001

app = FastAPI(title="navnmea")


class SentenceRequest(BaseModel):
    sentence: str
    validate_checksum: bool = True


@app.post("/sentences")
def decode_sentence(request: SentenceRequest) -> dict[str, Any]:
    """Decode one sentence and return its snapshot and summary.

    Rejected sentences answer HTTP 400 with
    ``{"detail": {"error": "format" | "checksum", "message": ...}}``.
    """
    parser = NMEAParser(validate_checksum=request.validate_checksum)
    try:
        parser.parse(request.sentence)
    except NMEAError as exc:
        raise HTTPException(
            status_code=400,
            detail={"error": error_kind(exc), "message": str(exc)},
        ) from exc
    return {
        "snapshot": snapshot_to_dict(parser.to_snapshot()),
        "summary": parser.summary(),
    }


def _decode_frame(parser: NMEAParser, sentence: str) -> str:
    try:
        parser.parse(sentence)
    except NMEAError as exc:
        return format_error_message(exc)
    return format_snapshot_message(parser.to_snapshot())


async def _answer_frames_until_disconnect(
    parser: NMEAParser,
    websocket: WebSocket,
) -> None:
    try:
        while True:
            sentence = await asyncio.wait_for(
                websocket.receive_text(), timeout=_TIMEOUT_SECONDS
            )
            await websocket.send_text(_decode_frame(parser, sentence))
    except TimeoutError:
        logger.info("Closing idle WebSocket connection")
        await websocket.close(code=_IDLE_CLOSE_CODE)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Decode sentences sent by a WebSocket client, one reply per frame.

    Each connection gets its own ``NMEAParser``. The connection closes with
    code 1001 if no frame arrives within ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    await websocket.accept()
    validate = websocket.query_params.get("validate_checksum", "true") != "false"
    parser = NMEAParser(validate_checksum=validate)
    await _answer_frames_until_disconnect(parser, websocket)
