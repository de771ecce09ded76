import uvicorn

from userhub.core.config.settings import settings


def main() -> None:
    uvicorn.run(
        "userhub.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
