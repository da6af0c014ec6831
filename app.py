# app.py - FastAPI server
import logging
import os
import uuid
from functools import lru_cache

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
import uvicorn

from config import get_settings
from errors import ApplicationRejected
from pipeline import DecisionPipeline
from translator import TranslatorClient

app = FastAPI(title="Health Insurance Decision API")

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("insurance-decision")


@app.on_event("startup")
def startup_event():
    """Load configuration once, failing fast when it is incomplete."""
    settings = get_settings()
    logger.setLevel(settings.log_level)
    logger.info("[STARTUP] Translator endpoint %s (%s)", settings.translator.endpoint, settings.translator.location)


# Dependency
@lru_cache
def get_pipeline() -> DecisionPipeline:
    return DecisionPipeline(TranslatorClient(get_settings().translator))


@app.post("/api/ProcessApplication")
async def process_application(request: Request, pipeline: DecisionPipeline = Depends(get_pipeline)):
    request_id = str(uuid.uuid4())
    raw = await request.body()
    logger.info("Insurance application request received; request_id=%s; bytes=%d", request_id, len(raw))

    try:
        decision = await pipeline.process(raw, request_id)
    except ApplicationRejected as e:
        return JSONResponse(
            status_code=400,
            content=e.to_response().model_dump(by_alias=True, exclude_none=True),
        )

    return JSONResponse(content=decision.model_dump(by_alias=True, exclude_none=True))


@app.get("/health")
def health():
    return {"ok": True}


def main():
    """Serve the API with uvicorn; HOST and PORT override the defaults."""
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))


if __name__ == "__main__":
    main()
