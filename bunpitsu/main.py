import asyncio
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from bunpitsu import startup
from bunpitsu.api.routes import router


def create_app(config=None):

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app_config = config if config is not None else startup.load_config()
        startup.setup_logging(app_config)

        analyzer, splitter = startup.setup_segmentation(app_config)
        app.state.analyzer = analyzer
        app.state.splitter = splitter

        if app_config.get("warm_up", True):
            await asyncio.to_thread(startup.warm_up, analyzer)

        yield

    app = FastAPI(lifespan=lifespan)

    static_dir = os.path.join(os.path.dirname(__file__), "static")
    if os.path.isdir(static_dir):
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    app.include_router(router)
    return app


app = create_app()


def run():
    import uvicorn
    uvicorn.run(app, host=os.environ.get("BUNPITSU_HOST", "127.0.0.1"), port=int(os.environ.get("BUNPITSU_PORT", "8000")))


if __name__ == "__main__":
    run()
