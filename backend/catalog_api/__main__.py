import uvicorn

from catalog_api.config import settings


def main():
    uvicorn.run("catalog_api.main:app", host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    main()
