# Role: FastAPI app bootstrap. Loads environment config early, registers routers, and exposes health/docs endpoints.

from fastapi import FastAPI

import trainer.config
trainer.config.load_env()

from trainer.api.chat import router as chat_router
from trainer.api.email import router as email_router
from trainer.api.state import router as state_router

app = FastAPI(title="CMPL Role-Play Trainer API", version="0.1.0")
app.include_router(chat_router)
app.include_router(email_router)
app.include_router(state_router)


@app.get("/")
def root() -> dict:
    # Role: quick discoverability for clients (where are docs/health).
    return {
        "message": "CMPL Role-Play Trainer API is running",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
