import logging
from typing import Annotated
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from azstocker import __version__
from azstocker.api.dependencies import get_clock, get_sheets_client, get_url_base
from azstocker.api.routers import schedule
from azstocker.stocking.errors import StockingError
from azstocker.stocking.models import Clock, Program
from azstocker.stocking.schedule import RangeFetcher, StockingSchedule


logger = logging.getLogger(__name__)


class HealthStatus(BaseModel):
    status: str
    version: str


app = FastAPI(title="AZ Stocker API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create shared API v1 router
api_v1 = APIRouter(prefix="/api/v1")

@api_v1.get("/health")
async def heath_check() -> HealthStatus:
    """Return health status of the API."""
    return {"status": "healthy", "version": __version__}

api_v1.include_router(schedule.router)

app.include_router(api_v1)


def build_sitemap(sheets_client: RangeFetcher, url_base: str, clock: Clock) -> str:
    """List the schedule URL of every program and of every water in it"""
    reader = StockingSchedule(sheets_client, clock)
    lines = []
    for program in Program:
        program_url = f"{url_base}/api/v1/programs/{program.value}"
        lines.append(program_url)
        try:
            stocking_data = reader.get(program)
        except StockingError as e:
            logger.error(f"Failed to get data for sitemap: {e}")
            continue

        stocking_data.sort_by_name()
        for water_name in stocking_data.water_names():
            lines.append(f"{program_url}?{urlencode({'waters': water_name})}")
    return "\n".join(lines) + "\n"


@app.get("/sitemap.txt", response_class=PlainTextResponse)
def sitemap(
    sheets_client: Annotated[RangeFetcher, Depends(get_sheets_client)],
    url_base: Annotated[str, Depends(get_url_base)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> str:
    return build_sitemap(sheets_client, url_base, clock)
