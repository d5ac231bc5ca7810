from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "NEIGHBORFIT_"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Neighborhood search
    default_radius_miles: float = 5.0
    min_neighborhoods: int = 3
    max_neighborhoods: int = 10

    # Mock data: fixed seed gives reproducible neighborhoods, None reseeds per process
    mock_seed: int | None = None

    # Preferences
    default_user_id: str = "default-user"

    # Matching: >1 scores batches on a thread pool
    match_workers: int | None = None


settings = Settings()
