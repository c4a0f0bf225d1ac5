"""FastAPI application: admin publishing API and the public menu viewer."""

import logging
from pathlib import Path
from typing import Dict

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from menu_publisher.api.routes.images import router as images_router
from menu_publisher.api.routes.publish import router as publish_router
from menu_publisher.api.routes.translate import router as translate_router
from menu_publisher.api.routes.viewer import router as viewer_router
from menu_publisher.config.settings import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Menu Publisher")
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Include Routers
app.include_router(publish_router, prefix="/api", tags=["Publish"])
app.include_router(translate_router, prefix="/api", tags=["Translate"])
app.include_router(images_router, prefix="/api", tags=["Images"])
app.include_router(viewer_router, tags=["Viewer"])


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("menu_publisher.main:app", host="127.0.0.1", port=8000, reload=True)
