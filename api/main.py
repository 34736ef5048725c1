from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from auth import router as auth_router
from core import db, errors, log, settings
from feedback import router as feedback_router
from posts import router as posts_router
from sitemap import router as sitemap_router
from users import router as users_router

@asynccontextmanager
async def lifespan(app: FastAPI):
    log.configure_logging(settings.log_level())
    # One client per process; handlers get the database handle via db.get_database.
    client = db.create_client()
    try:
        app.state.database = await db.open_database(client)
        await db.ensure_indexes(app.state.database)
        yield
    finally:
        app.state.database = None
        await client.close()


app = FastAPI(title="Blog API", lifespan=lifespan)

# Requests without an Origin header (same-origin, curl) are not affected.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.install_error_handlers(app)

app.include_router(posts_router.router, tags=["posts"])
app.include_router(auth_router.router, tags=["auth"])
app.include_router(users_router.router, tags=["users"])
app.include_router(feedback_router.router, tags=["feedback"])
app.include_router(sitemap_router.router, tags=["sitemap"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Backend is running!"


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port())
