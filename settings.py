from dotenv import load_dotenv
from loguru import logger as l
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    youtrack_url: str = ''
    youtrack_token: str = ''
    request_timeout: float = 20.0
    project_filter: str = ''
    page_size: int = Field(16000, gt=0)
    retention_years: int = Field(3, gt=0)
    page_delay: float = Field(0.5, ge=0)
    dry_run: bool = False
    log_level: str = 'INFO'
    time_format: str = '%Y-%m-%d %H:%M:%S'

    @field_validator('youtrack_url')
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip('/')

    @field_validator('log_level')
    @classmethod
    def known_log_level(cls, value: str) -> str:
        value = value.upper()
        # неизвестный уровень: loguru бросает ValueError
        l.level(value)
        return value

    @property
    def projects(self) -> list[str]:
        return [p.strip() for p in self.project_filter.split(',') if p.strip()]


load_dotenv()
settings = Settings()
logger = l
