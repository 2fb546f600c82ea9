# chesstime/routes/fetch.py
import logging
from typing import AsyncIterator

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, JSONResponse

from chesstime.config import get_settings
from chesstime.schemas import ErrorResponse, PlaytimeResponse
from chesstime.services.chesscom import ChessComClient, ChessComError
from chesstime.services.playtime import aggregate_playtime
from chesstime.services.profile import fetch_profile_summary

logger = logging.getLogger("chesstime.routes.fetch")

router = APIRouter(prefix="/fetch", tags=["fetch"])


async def get_chesscom_client() -> AsyncIterator[ChessComClient]:
    async with ChessComClient(get_settings()) as client:
        yield client


@router.get("/playtime/{username}", response_model=PlaytimeResponse,
            responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
            summary="Total and monthly playtime",
            description="""
                        Sums the StartTime/EndTime window of every game in the
                        player's monthly archives. Games over 80 minutes or
                        without both clock headers are ignored.
                        """
)
async def get_playtime(
    username: str,
    client: ChessComClient = Depends(get_chesscom_client),
):
    username = username.lower()
    try:
        details = await fetch_profile_summary(client, username)
    except ChessComError as e:
        return JSONResponse(status_code=400, content={"error": e.message})

    try:
        report = await aggregate_playtime(client, username, joined=details.joined)
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"❌ Playtime for {username} failed: {e}")
        return JSONResponse(
            status_code=500, content={"error": f"❌ Failed to fetch archives: {e}"}
        )

    return report.to_response()


@router.get("/{username}", response_class=HTMLResponse, summary="Profile summary")
async def get_details(
    username: str,
    client: ChessComClient = Depends(get_chesscom_client),
):
    try:
        details = await fetch_profile_summary(client, username)
    except ChessComError as e:
        # errors go back as plain text with a 200, the form page just shows them
        return HTMLResponse(e.message)

    return HTMLResponse(details.report.replace("\n", "<br>"))
