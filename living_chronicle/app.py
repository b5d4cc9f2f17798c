import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from living_chronicle.cache import ChronicleCache
from living_chronicle.routes import router
from living_chronicle.service import ChronicleService
from living_chronicle.storage import Storage

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


def create_app(data_dir: Path | None = None) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))

    app = FastAPI(title="Living Chronicle")
    # Process-lifetime cache, owned by the app rather than the engine
    app.state.service = ChronicleService(Storage(resolved), cache=ChronicleCache())
    app.include_router(router, prefix="/api")
    return app
