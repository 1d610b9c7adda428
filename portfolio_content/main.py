from fastapi import FastAPI

from portfolio_content.api.routes.content import router as content_router
from portfolio_content.api.routes.parse import router as parse_router
from portfolio_content.config import configure_logging

configure_logging()

app = FastAPI(
    title="Portfolio Content Parser",
    description="Parses the portfolio's profile, experience, project catalog and contact documents into typed records",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(content_router)
app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "portfolio-content", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}
