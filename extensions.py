from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

from .utils.hasher import PasswordHasher
from .utils.sanitizer import Sanitizer

db = SQLAlchemy()
migrate = Migrate()
hasher = PasswordHasher()
sanitizer = Sanitizer()
