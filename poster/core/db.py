from tortoise import Tortoise

from poster.core.config import settings

TORTOISE_ORM = {
    "connections": {
        "default": settings.database_url,
    },
    "apps": {
        "models": {
            "models": ["poster.models"],
            "default_connection": "default",
        }
    },
}


async def init_db(db_url: str | None = None) -> None:
    config = TORTOISE_ORM
    if db_url:
        config = {**TORTOISE_ORM, "connections": {"default": db_url}}
    await Tortoise.init(config=config)
    await Tortoise.generate_schemas(safe=True)


async def close_db() -> None:
    await Tortoise.close_connections()
