import uvicorn

from core.config import settings, setup_logging

if __name__ == "__main__":
    setup_logging()
    uvicorn.run(
        "web.api:app",
        host=settings.WEB_HOST,
        port=settings.WEB_PORT,
        reload=True,
    )
