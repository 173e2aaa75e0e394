"""HTTP route definitions for the service."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status

from app.schemas import SensorRecordPayload
from services.decoder import RecordDecoder, build_default_decoder
from services.errors import DecodeError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_decoder() -> RecordDecoder:
    return build_default_decoder()


@router.post(
    "/records",
    response_model=SensorRecordPayload,
    summary="Decode the sensor line contained in an uploaded data file.",
)
async def decode_record(
    file: UploadFile = File(..., description="SkyAlert one-line data file."),
    tz: Optional[str] = Query(
        None, description="IANA zone the sensor clock runs in; defaults to the service zone."
    ),
    decoder: RecordDecoder = Depends(get_decoder),
) -> SensorRecordPayload:
    contents = await file.read()
    await file.close()
    if not contents.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded file is empty.",
        )

    try:
        if tz is not None:
            decoder = decoder.with_location(tz)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    line = contents.splitlines()[0]
    try:
        record = decoder.decode(line)
    except DecodeError as exc:
        logger.info(
            "Sensor upload could not be decoded",
            extra={"source": file.filename, "reason": str(exc)},
        )
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    return SensorRecordPayload.from_record(record)


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
