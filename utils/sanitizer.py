import uuid

import bleach


# 与 js 端常见的 xss 过滤行为一致：未列入白名单的标签被转义而不是删除
_DEFAULT_ALLOWED_TAGS = frozenset({"b", "i", "em", "strong", "u", "code", "br"})


class Sanitizer:
    """对外输出字段的 HTML/脚本 过滤器。

    未在白名单中的标签会被转义（``<script>`` -> ``&lt;script&gt;``），
    白名单标签保留但会去掉所有属性。普通文本中的 ``&`` 和已有实体原样保留。
    """

    def __init__(self, allowed_tags=None):
        self.allowed_tags = frozenset(allowed_tags or _DEFAULT_ALLOWED_TAGS)

    def init_app(self, app):
        tags = app.config.get("SANITIZER_ALLOWED_TAGS")
        if tags is not None:
            self.allowed_tags = frozenset(tags)

    def clean(self, value: str | None) -> str:
        """Return value with disallowed markup escaped; None becomes ''."""
        if not value:
            return ""
        if not isinstance(value, str):
            raise ValueError("invalid value type")
        # bleach 会把所有 & 转成 &amp;，先用占位符替换，清洗后再还原
        placeholder = f"amp{uuid.uuid4().hex}"
        cleaned = bleach.clean(
            value.replace("&", placeholder),
            tags=self.allowed_tags,
            attributes={},
            strip=False,
        )
        return cleaned.replace(placeholder, "&")
