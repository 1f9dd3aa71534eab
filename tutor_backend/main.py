# Role: FastAPI app bootstrap. Loads environment config early, registers routers under /api,
# and exposes discoverability/health endpoints.

import uvicorn
from fastapi import FastAPI

import tutor_backend.config
tutor_backend.config.load_env()

from tutor_backend.api.chat import router as chat_router

app = FastAPI(title="Tutor Chat API", version="0.1.0")
app.include_router(chat_router, prefix="/api")


@app.get("/api/")
def root() -> dict:
    # Role: quick discoverability for clients (where are docs/health, which mode is active).
    return {
        "message": "Tutor Chat API is running",
        "mode": tutor_backend.config.CHAT_MODE.value,
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    uvicorn.run("tutor_backend.main:app", host="0.0.0.0", port=8000, reload=tutor_backend.config.DEBUG)


if __name__ == "__main__":
    run()
