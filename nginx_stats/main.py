from __future__ import annotations

import logging
import os
from dataclasses import asdict
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from nginx_stats.errors import DecodeError, FileAccessError
from nginx_stats.services.aggregator import compute_summary
from nginx_stats.services.formatter import format_summary
from nginx_stats.services.storage import LogStore

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────────────────────
# Config
# ──────────────────────────────────────────────────────────────────────────────

API_PREFIX = "/api"
LOG_FILE_PATH = os.getenv("LOG_FILE", "./data/access.log.jsonl")  # nginx JSON lines


def get_store() -> LogStore:
    return LogStore(LOG_FILE_PATH)


# ──────────────────────────────────────────────────────────────────────────────
# App
# ──────────────────────────────────────────────────────────────────────────────

app = FastAPI(title="nginx access log statistics")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # dev OK; lock down in prod
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# ──────────────────────────────────────────────────────────────────────────────
# Health
# ──────────────────────────────────────────────────────────────────────────────


@app.get(f"{API_PREFIX}/health")
def health() -> Dict[str, Any]:
    return asdict(get_store().stat())


# ──────────────────────────────────────────────────────────────────────────────
# Summary (same text as the command line)
# ──────────────────────────────────────────────────────────────────────────────


@app.get(f"{API_PREFIX}/summary", response_class=PlainTextResponse)
def summary() -> str:
    store = get_store()
    try:
        records = store.load_records()
    except FileAccessError as exc:
        raise HTTPException(status_code=404, detail=f"Error reading log file: {exc}") from exc
    except DecodeError as exc:
        raise HTTPException(status_code=422, detail=f"Error reading log file: {exc}") from exc

    logger.debug("Serving summary of %d records from %s", len(records), store.file_path)
    return format_summary(compute_summary(records))
