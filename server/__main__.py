"""CLI entrypoint for launching the FastAPI application."""

import uvicorn

from server.core.config import SERVER_HOST, SERVER_PORT


def main() -> None:
    uvicorn.run(
        "server.api:create_app",
        factory=True,
        host=SERVER_HOST,
        port=SERVER_PORT,
        reload=False,
    )


if __name__ == "__main__":
    main()
