"""应用配置模块

提供不同环境的配置类，支持通过环境变量覆盖默认值。
"""

import os


class SqlConfig:
    SQLNAME = 'thingful'
    SQLURL = '127.0.0.1'
    SQLPORT = '3306'
    SQLUSER = 'root'
    SQLPASSWORD = ''


class SecurityConfig:
    # werkzeug generate_password_hash 的 method 参数
    PASSWORD_HASH_METHOD = 'scrypt'
    # 输出字段允许保留的标签，其余标签一律转义
    SANITIZER_ALLOWED_TAGS = ('b', 'i', 'em', 'strong', 'u', 'code', 'br')


class AppConfig(SqlConfig, SecurityConfig):
    # 允许通过环境变量覆盖
    SQLNAME = os.getenv("SQLNAME", SqlConfig.SQLNAME)
    SQLURL = os.getenv("SQLURL", SqlConfig.SQLURL)
    SQLPORT = os.getenv("SQLPORT", SqlConfig.SQLPORT)
    SQLUSER = os.getenv("SQLUSER", SqlConfig.SQLUSER)
    SQLPASSWORD = os.getenv("SQLPASSWORD", SqlConfig.SQLPASSWORD)
    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", SecurityConfig.PASSWORD_HASH_METHOD)

    _credentials = f"{SQLUSER}:{SQLPASSWORD}" if SQLPASSWORD else SQLUSER
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL",
        f"mysql+pymysql://{_credentials}@{SQLURL}:{SQLPORT}/{SQLNAME}?charset=utf8mb4",
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv("SECRET_KEY", "dev")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestConfig(AppConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    # 测试中使用低开销的哈希，避免拖慢用例
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    LOG_LEVEL = "DEBUG"


_CONFIGS = {
    "default": AppConfig,
    "production": AppConfig,
    "testing": TestConfig,
}


def get_config(env: str | None = None):
    """
    返回用于 Flask app.config.from_object 的配置类。
    env 为空时读取 APP_ENV 环境变量，未知名称回退到 AppConfig。
    """
    env = env or os.getenv("APP_ENV", "default")
    return _CONFIGS.get(env, AppConfig)
