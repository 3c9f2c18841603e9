# order_intake/main.py
import sys
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, Response

from order_intake.config import settings
from order_intake.database import create_engine, init_store
from order_intake.presentation.api import router

logging.basicConfig(
    level=settings.LOGGING_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения"""
    # 1. Без строки подключения не стартуем
    settings.validate()

    # 2. Подключаемся к хранилищу и проверяем его; любая ошибка фатальна
    engine = create_engine(settings.DATABASE_URL)
    try:
        app.state.session_factory = await init_store(engine, settings.STORE_TIMEOUT)
    except Exception:
        await engine.dispose()
        raise
    logger.info("Хранилище заказов подключено")

    yield

    logger.info("Приложение останавливается...")
    await engine.dispose()


app = FastAPI(
    title="Order Intake Service",
    description="Приём заявок на печать и производство",
    version="1.0.0",
    lifespan=lifespan
)


@app.middleware("http")
async def cors(request: Request, call_next):
    # Preflight отвечаем сами на любом пути
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


app.include_router(router)


def main():
    settings.validate()
    logger.info(f"Сервер запускается на порту {settings.PORT}...")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOGGING_LEVEL.lower())


if __name__ == "__main__":
    main()
