"""
配置文件 - 项目配置管理
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """项目配置"""

    # 基础配置
    DEBUG: bool = Field(default=False)

    # 日志级别；为空时按 DEBUG 推断
    LOG_LEVEL: str | None = Field(default=None)

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, v):
        """允许小写写法，例如 LOG_LEVEL=debug。"""
        if isinstance(v, str):
            s = v.strip().upper()
            return s or None
        return v


settings = Settings()
