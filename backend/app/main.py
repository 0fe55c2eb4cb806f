import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from app.config import get_log_level, get_server_address
from routes.games import router as games_router

# Load .env from backend dir before anything reads the environment.
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env"))
logging.basicConfig(level=get_log_level())

app = FastAPI(title="Battleship Games API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)
app.include_router(games_router)


class HealthResponse(BaseModel):
    status: str


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok")


def run() -> None:
    import uvicorn

    host, port = get_server_address()
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
