from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    excerpt_length: int = 200
    admin_emails: list[str] = []
    dev_mode: bool = False
    login_url: str = "/__exe.dev/login"
    max_content_length: int = 200_000

    model_config = {"env_prefix": "BLOGMARK_"}


settings = Settings()
