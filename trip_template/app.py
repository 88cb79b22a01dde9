"""
Template Builder : FastAPI app
Démarrer : uvicorn trip_template.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .router import router

logging.basicConfig(level=config.log_level(), format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Trip Template Builder", version="1.0.0", docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
