import uvicorn

from shop_api.app import create_app
from shop_api.config import get_settings

app = create_app()


def run():
    settings = get_settings()
    uvicorn.run("shop_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
