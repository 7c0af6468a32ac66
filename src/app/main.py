import uvicorn

from src.app.application import create_app
from src.app.containers import Container
from src.app.logging import configure_logging

# Configure logging at module load time
configure_logging()

container = Container()
app = create_app(container=container)


if __name__ == "__main__":
    uvicorn.run("src.app.main:app", host="0.0.0.0", port=3000)
