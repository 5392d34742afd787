"""Run the todo-api server with uvicorn."""

import uvicorn

from todo_api.main import create_app, load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run(
        create_app(settings=settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )


if __name__ == "__main__":
    main()
