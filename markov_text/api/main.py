import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from markov_text.api.routes import router
from markov_text.config import settings
from markov_text.services import load_model

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.corpus_path:
        logger.warning("MARKOV_CORPUS_PATH not set; starting without a model")
    else:
        try:
            load_model(settings.corpus_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("cannot read corpus %s: %s; starting without a model", settings.corpus_path, e)
    yield

app = FastAPI(title="Markov Text Generator", lifespan=lifespan)
app.include_router(router)

@app.get("/")
def home():
    return {"ok": True, "app": "Markov Text Generator"}


def serve():
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    serve()
