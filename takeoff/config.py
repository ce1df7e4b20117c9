from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Takeoff Engine"
    LOG_LEVEL: str = "INFO"

    # Presentation — number display in report tables
    DISPLAY_LOCALE: str = "pt_BR"

    # Floor filter value that means "every floor"
    ALL_FLOORS_SENTINEL: str = "all"

    # Parcel drawing viewport (px)
    POLYGON_VIEWPORT_WIDTH: int = 400
    POLYGON_VIEWPORT_HEIGHT: int = 300
    POLYGON_PADDING: int = 30

    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
