import uvicorn

from statusboard.config import settings


def main() -> None:
    uvicorn.run("statusboard.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
