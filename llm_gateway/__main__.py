"""Entry point for `python -m llm_gateway`."""

import uvicorn

from .settings import settings


def main():
    uvicorn.run(
        "llm_gateway.app:app",
        host=settings.HOST,
        port=settings.PORT,
    )


if __name__ == "__main__":
    main()
