"""Quotify API: FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quotify.api.routers import quotes

app = FastAPI(title="quotify", version="0.1.0")

# CORS: allow the widget front end during development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:7863"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quotes.router)


@app.get("/health")
def health():
    return {"status": "ok"}
