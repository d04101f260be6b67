import logging

from fastapi import FastAPI

from strayfund.api.campaigns import router as campaigns_router
from strayfund.api.donations import router as donations_router
from strayfund.api.pages import router as pages_router
from strayfund.api.reports import router as reports_router
from strayfund.api.stories import router as stories_router
from strayfund.api.transactions import router as transactions_router
from strayfund.api.volunteers import router as volunteers_router
from strayfund.db.seed import seed_initial_data
from strayfund.db.session import AsyncSessionLocal
from strayfund.db.settings import get_settings

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="0.1.0")


@app.on_event("startup")
async def on_startup() -> None:
    async with AsyncSessionLocal() as session:
        await seed_initial_data(session, seed_demo=settings.seed_demo)
    logger.info("%s started", settings.app_name)


@app.get("/health", tags=["health"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(pages_router)
app.include_router(campaigns_router)
app.include_router(donations_router)
app.include_router(volunteers_router)
app.include_router(stories_router)
app.include_router(transactions_router)
app.include_router(reports_router)
