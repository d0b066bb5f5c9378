"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings


DEFAULT_MENU_PROMPT = "\n(p)arse, (a)dd, (m)ultiply, or (q)uit? => "


class BigIntegerConfig(BaseSettings):
    """Big integer calculator configuration"""

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8095

    # Harness input ceiling in characters, <= 0 disables it.
    # Keeps one schoolbook multiply request to a few seconds.
    max_input_length: int = 2_000

    # Menu configuration
    menu_prompt: str = DEFAULT_MENU_PROMPT

    class Config:
        env_prefix = "BIGINT_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = BigIntegerConfig()


def get_config() -> BigIntegerConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BigIntegerConfig:
    """Reload configuration from environment"""
    global config
    config = BigIntegerConfig()
    return config


def input_too_long(text: str, settings: BigIntegerConfig) -> bool:
    """Check a raw operand string against the configured ceiling"""
    limit = settings.max_input_length
    return limit > 0 and len(text) > limit
