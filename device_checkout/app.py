import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from device_checkout.config.config import CORS_HEADERS, PORT, SHEETS_ENDPOINT_PATH
from device_checkout.services.relay import handle_sheets_request

# --- Logging Setup ---
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO,
)

# Set higher logging level for noisy libraries
logging.getLogger("urllib3").setLevel(logging.WARNING)
logging.getLogger("google.auth").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

# --- FastAPI App Instance ---
app = FastAPI(
    title="Device Checkout Sheets Relay",
    description="Appends and reads device checkout rows in a Google Sheet using a service account",
    version="1.0.0",
)


# --- Sheets Relay Endpoint ---
# Dispatch is by the body's "action" field, so every method lands here.
@app.api_route(SHEETS_ENDPOINT_PATH, methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
async def sheets_relay(request: Request):
    """Forwards an append/read action to the Google Sheets API."""
    raw_body = await request.body()
    status_code, payload = await run_in_threadpool(handle_sheets_request, request.method, raw_body)

    if payload is None:
        return Response(status_code=status_code, headers=CORS_HEADERS)
    return JSONResponse(payload, status_code=status_code, headers=CORS_HEADERS)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# --- Main execution for local testing (using uvicorn) ---
if __name__ == "__main__":
    import uvicorn
    logger.info("Starting Uvicorn server for local development...")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
