# table_extract/api.py
# FastAPI entrypoint: POST markup, get back the matching table as JSON.

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .export import to_payload
from .schemas import ErrorResponse, HealthResponse, TableRequest, TableResponse
from .settings import get_settings
from .table import find_table

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# App setup
# -----------------------------------------------------------------------------
app = FastAPI(title="HTML Table Extractor")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------
@app.get("/api/health", response_model=HealthResponse)
def health():
    return {"status": "ok", "parser": get_settings().HTML_PARSER}


@app.post(
    "/api/tables",
    response_model=TableResponse,
    responses={404: {"model": ErrorResponse}, 413: {"model": ErrorResponse}},
)
def extract_table(req: TableRequest):
    st = get_settings()
    if len(req.html.encode("utf-8")) > st.MAX_HTML_BYTES:
        raise HTTPException(status_code=413, detail=f"html exceeds {st.MAX_HTML_BYTES} bytes")

    table = find_table(req.html, id=req.id, headers=req.headers)
    if table is None:
        logger.info("No table matched id=%r headers=%r", req.id, req.headers)
        raise HTTPException(status_code=404, detail="No matching table found")

    return to_payload(table)


@app.get("/")
def root():
    return {"message": "HTML Table Extractor is running. POST /api/tables with {\"html\": ...}"}


# -----------------------------------------------------------------------------
# Local dev
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    import os
    import uvicorn

    get_settings().validate()
    uvicorn.run("table_extract.api:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")), reload=False)
