from __future__ import annotations

from fastapi import FastAPI

from pool_tags.api.routers.tags import router as tags_router


app = FastAPI(title="Uniswap v3 Pool Tags API")
app.include_router(tags_router)
