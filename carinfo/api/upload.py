"""
Purpose:
- POST /upload: take one image from multipart field `image`, ask Gemini what
  vehicle it shows, map the answer to 200 / 400 / 500.
- Linear: receive -> call model -> clean text -> parse -> respond. The first
  failure ends the request; nothing is retried.

Notes:
- The form is read by hand: anything in `image` that is not a file (absent,
  a plain text field, zero bytes) is the same 400, never a 422.
"""

from __future__ import annotations
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile
from ..core.errors import (
    GENERIC_ERROR_MESSAGE,
    MissingImageError,
    RelayError,
    UpstreamServiceError,
    VehicleNotFoundError,
)
from ..services.images import detect_mime_type, encode_base64
from ..vlm.gemini_client import GeminiClient
from ..vlm.schema import (
    CarInfo,
    CarInfoResponse,
    ErrorResponse,
    VehicleNotFound,
    decode_reply,
)
from .deps import get_gemini_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])

# documents the multipart body, which FastAPI cannot infer from a raw Request
UPLOAD_BODY = {
    "requestBody": {
        "required": False,
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {"image": {"type": "string", "format": "binary"}},
                }
            }
        },
    }
}

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())

@router.post(
    "/upload",
    response_model=CarInfoResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra=UPLOAD_BODY,
)
async def upload(request: Request, gemini: GeminiClient = Depends(get_gemini_client)):
    raw, filename, content_type = b"", None, None
    async with request.form() as form:
        image = form.get("image")
        if isinstance(image, UploadFile):
            raw = await image.read()
            filename, content_type = image.filename, image.content_type

    if not raw:
        err = MissingImageError()
        logger.warning("Rejected upload: %s", err.message)
        return _error(err.status_code, err.message)

    try:
        mime_type = detect_mime_type(raw, content_type)
        text = await gemini.describe_vehicle(raw, mime_type)
        logger.info("Server response: %s", text)
        reply = decode_reply(text)
    except UpstreamServiceError as e:
        logger.exception("Google API Error: %s", e.detail)
        return _error(e.status_code, e.message)
    except RelayError as e:
        logger.exception("Error: %s", e.detail or e.message)
        return _error(e.status_code, e.message)
    except Exception:
        logger.exception("Error while identifying vehicle in %s", filename)
        return _error(500, GENERIC_ERROR_MESSAGE)

    if isinstance(reply, VehicleNotFound):
        err = VehicleNotFoundError(reply.error)
        logger.warning("Model found no vehicle in %s: %s", filename, err.message)
        return _error(err.status_code, err.message)

    car = CarInfo(vehicle=reply.vehicle.as_payload(), imageBase64=encode_base64(raw))
    return CarInfoResponse(carInfo=car)
