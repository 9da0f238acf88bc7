"""开发环境启动入口

APP_ENV 选择配置（默认 AppConfig），HOST / PORT / FLASK_DEBUG 控制监听参数。
生产环境请使用 WSGI 服务器加载 ``run:app``；表结构变更使用 ``flask --app run db upgrade``。
"""

import logging
import os
import sys
from importlib import import_module

# 仓库根目录本身就是包，直接运行本文件时需要把上级目录加入 sys.path
_root = os.path.dirname(os.path.abspath(__file__))
if os.path.dirname(_root) not in sys.path:
	sys.path.insert(0, os.path.dirname(_root))

app = import_module(os.path.basename(_root)).create_app(os.getenv("APP_ENV"))
logger = logging.getLogger("thingful_users.run")


def main():
	host = os.getenv("HOST", "127.0.0.1")
	port = int(os.getenv("PORT", "5000"))
	debug = os.getenv("FLASK_DEBUG", "0") == "1"
	logger.info("Starting user registration API on %s:%s (debug=%s)", host, port, debug)
	app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
	main()
