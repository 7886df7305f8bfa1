import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from inference.fallback import generate_with_fallback
from models.generation import ErrorResponse, Generation

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ai"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

GLOBAL_FAILURE_DETAILS = "Global failure across all available models."

# Every method lands here so non-POST gets our 405 envelope, not FastAPI's
_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


# ---------- Helpers ----------

def _json(status_code: int, model) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=model.model_dump(exclude_none=True),
        headers=CORS_HEADERS,
    )


def _client_error(status_code: int, message: str) -> JSONResponse:
    return _json(status_code, ErrorResponse(error=message))


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


# ---------- Endpoint ----------

@router.api_route("/ai", methods=_ALL_METHODS)
@router.api_route("/.netlify/functions/ai", methods=_ALL_METHODS, include_in_schema=False)
async def handle_ai(request: Request):
    """
    Generates text for {"prompt": "..."} using the first available model.
    Responds with {"result", "used_model"} or an {"error", ...} envelope.
    """
    if request.method == "OPTIONS":
        return PlainTextResponse("OK", status_code=200, headers=CORS_HEADERS)

    if request.method != "POST":
        return _client_error(405, "Method Not Allowed. Use POST.")

    raw = await request.body()
    if not raw:
        return _client_error(400, "Request body is empty.")

    try:
        body = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return _client_error(400, "Invalid JSON in request body.")

    prompt = body.get("prompt") if isinstance(body, dict) else None
    if not prompt or not isinstance(prompt, str):
        return _client_error(400, "Missing 'prompt' in request body.")

    try:
        outcome = await generate_with_fallback(prompt)
    except Exception as exc:
        logger.exception("Critical failure")
        return _json(
            500,
            ErrorResponse(
                error=str(exc) or "Internal Server Error",
                details=GLOBAL_FAILURE_DETAILS,
            ),
        )

    logger.debug("Served by %s after %d attempt(s): %s",
                 outcome.used_model, len(outcome.attempts), list(outcome.attempts))
    return _json(200, Generation(result=outcome.text, used_model=outcome.used_model))
