from werkzeug.security import check_password_hash, generate_password_hash


class PasswordHasher:
    """单向加盐密码哈希，封装 werkzeug.security。

    method 默认 scrypt，可通过 PASSWORD_HASH_METHOD 配置覆盖，
    例如 ``pbkdf2:sha256:600000``。
    """

    def __init__(self, method: str = "scrypt"):
        self.method = method

    def init_app(self, app):
        self.method = app.config.get("PASSWORD_HASH_METHOD", self.method)

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self.method)

    def verify(self, password: str, password_hash: str) -> bool:
        if not password_hash:
            return False
        return check_password_hash(password_hash, password)
