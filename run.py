import uvicorn

from taskboard.config import get_settings

settings = get_settings()

# Production config
if settings.ENV == "prod":
    HOST = "0.0.0.0"
    RELOAD = False
else:
    HOST = settings.HOST
    RELOAD = True  # Enable live reload in local development
    print("[Info] Running in local mode with reload enabled.")

# Start the FastAPI app
if __name__ == "__main__":
    uvicorn.run("taskboard.main:app", host=HOST, port=settings.PORT, reload=RELOAD)
