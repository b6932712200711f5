"""Run the recipe revision service locally with auto-reload."""

import os

import uvicorn


def main() -> None:
    """Run the server in local configuration.

    ``HOST`` and ``PORT`` override the default bind address.
    """
    uvicorn.run(
        "app.main:app",
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "8000")),
        reload=True,
    )


if __name__ == "__main__":
    main()
