from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "Writing Studio"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Демонстрационный проект при старте
    seed_sample_project: bool = True
    project_name: str = "My Writing Project"

    # Хранение снимков дерева; без DATABASE_URL всё живёт только в памяти
    database_url: Optional[str] = None
    database_echo: bool = False

    # demo | disabled
    generation_backend: str = "demo"
    generation_delay_seconds: float = 1.5

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
