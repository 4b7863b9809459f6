from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class ServiceSettings(BaseSettings):
    log_level: str = "INFO"
    json_logs: bool = True
    api_prefix: str = "/api/v1"
    # Optional YAML file replacing the built-in assessment tables
    definitions_path: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix='ASSESSMENT_')


def get_settings() -> ServiceSettings:
    return ServiceSettings()
