import uvicorn

from poster.app import create_app
from poster.core.config import settings

app = create_app()

if __name__ == "__main__":
    uvicorn.run("poster.main:app", host="0.0.0.0", port=settings.port, reload=True)
