from pathlib import Path
from typing import Any, List
from urllib.request import getproxies

import dotenv
from loguru import logger
from pydantic import SecretStr, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from telegram.ext import Application

from translator.exceptions import ConfigurationError

dotenv.load_dotenv()


PROJECT_DIR = Path(__file__).parent
LOG_DIR = PROJECT_DIR.joinpath("logs")

DEFAULT_PROVIDER = "google"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    TELEGRAM_BOT_TOKEN: SecretStr = Field(
        default="", description="通过 https://t.me/BotFather 获取机器人的 API_TOKEN，必填"
    )

    DEFAULT_SOURCE_LANGUAGE: str = Field(
        default="zh-CN", description="自动翻译时的源语言"
    )

    DEFAULT_TARGET_LANGUAGE: str = Field(default="en", description="自动翻译时的目标语言")

    API_PRIORITY: str = Field(
        default="google,libre,lingva",
        description="翻译后端的优先级，逗号分隔。按顺序尝试，第一个成功的结果即为最终结果。",
    )

    providers: List[str] = Field(
        default_factory=list,
        description="配置 API_PRIORITY 后，id 被清洗到该列表方便使用",
    )

    API_TIMEOUT: int = Field(
        default=5000, description="单个翻译后端请求的超时时间（毫秒）"
    )

    AUTO_TRANSLATE: bool = Field(
        default=False, description="是否自动将群内的中文消息翻译为英文并以回复的形式发送"
    )

    ENABLE_CACHE: bool = Field(default=True, description="是否缓存翻译结果")

    CACHE_TTL: int = Field(
        default=24 * 60 * 60 * 1000, description="翻译缓存的有效期（毫秒），默认 24 小时"
    )

    ENABLE_SINGLE_FLIGHT: bool = Field(
        default=False,
        description="并发的相同翻译请求（同一文本与目标语言）是否共享同一次后端调用",
    )

    GOOGLE_TRANSLATE_URL: str = Field(
        default="https://translate.googleapis.com/translate_a/single",
        description="Google 翻译（gtx 客户端）接口地址",
    )

    LIBRETRANSLATE_URL: str = Field(
        default="https://libretranslate.de/translate", description="LibreTranslate 接口地址"
    )

    LINGVA_URL: str = Field(
        default="https://lingva.ml/api/v1", description="Lingva Translate 接口前缀"
    )

    HTTP_REQUEST_TIMEOUT: float = Field(
        default=75.0,
        description="HTTP 请求超时时间（秒），用于 Telegram API 调用。默认 75 秒。",
    )

    LOG_LEVEL: str = Field(default="DEBUG", description="终端与 runtime.log 的日志级别")

    def model_post_init(self, context: Any, /) -> None:
        if not self.providers:
            self.providers = [
                i.strip().lower() for i in self.API_PRIORITY.split(",") if i.strip()
            ]

    @property
    def api_timeout_seconds(self) -> float:
        return self.API_TIMEOUT / 1000

    @property
    def cache_ttl_seconds(self) -> float:
        return self.CACHE_TTL / 1000

    def validate_config(self) -> None:
        """Check the settings the bot cannot run without.

        Raises:
            ConfigurationError: the bot token is missing
        """
        if not self.TELEGRAM_BOT_TOKEN.get_secret_value():
            raise ConfigurationError(
                "TELEGRAM_BOT_TOKEN is not defined in your .env file or environment variables."
            )

        if not self.providers:
            logger.warning(
                f"API_PRIORITY is not set or empty. Defaulting to \"{DEFAULT_PROVIDER}\"."
            )
            self.providers = [DEFAULT_PROVIDER]

        logger.success(f"Configuration loaded. API priority: {', '.join(self.providers)}")

        if self.AUTO_TRANSLATE:
            logger.info("Auto-translation of Chinese messages is ENABLED.")
        else:
            logger.info("Auto-translation of Chinese messages is DISABLED.")

        if self.ENABLE_CACHE:
            logger.info(f"Translation caching is ENABLED with TTL: {self.cache_ttl_seconds:g}s.")
        else:
            logger.info("Translation caching is DISABLED.")

    def get_default_application(self) -> Application:
        _base_builder = (
            Application.builder()
            .token(self.TELEGRAM_BOT_TOKEN.get_secret_value())
            .connect_timeout(self.HTTP_REQUEST_TIMEOUT)
            .write_timeout(self.HTTP_REQUEST_TIMEOUT)
            .read_timeout(self.HTTP_REQUEST_TIMEOUT)
        )
        if proxy_url := getproxies().get("http"):
            logger.success(f"使用代理: {proxy_url}")
            application = _base_builder.proxy(proxy_url).get_updates_proxy(proxy_url).build()
        else:
            application = _base_builder.build()

        return application


settings = Settings()  # type: ignore
