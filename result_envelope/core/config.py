from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用程序设置，从环境变量加载。"""

    APP_NAME: str = "result-envelope"
    APP_VERSION: str = "0.1.0"

    # Web服务配置
    WEB_HOST: str = "0.0.0.0"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "info"
    REQUEST_ID_HEADER: str = "X-Request-ID"

    # 日志文件记录和轮转
    LOG_TO_FILE: bool = False
    LOG_FILE_PATH: str = "logs/app.log"
    LOG_ROTATION_POLICY: str = "time"  # 可选: "time", "size"
    LOG_ROTATION_WHEN: str = "D"  # 用于 TimedRotatingFileHandler
    LOG_ROTATION_INTERVAL: int = 1
    LOG_BACKUP_COUNT: int = 7
    LOG_MAX_BYTES: int = 10 * 1024 * 1024  # 用于基于大小的轮转

    # 错误信封渲染
    EXPOSE_ERROR_DETAIL: bool = False
    SERVICE_EXCEPTION_HTTP_STATUS: int = 200

    # 系统管理接口；未配置 ADMIN_TOKEN 时全部拒绝
    ADMIN_TOKEN: str | None = None
    ADMIN_TOKEN_HEADER: str = "X-Admin-Token"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)


settings = Settings()

