import uvicorn

from jobboard.config import settings

if __name__ == "__main__":
    uvicorn.run("jobboard.main:app", host=settings.host, port=settings.port)
