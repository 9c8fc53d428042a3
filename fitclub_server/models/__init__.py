# fitclub_server/models/__init__.py

from sqlalchemy.orm import declarative_base


Base = declarative_base()


from .user import User  # noqa: E402
from .workout import Workout, Exercise, Challenge  # noqa: E402
from .progress import Progress  # noqa: E402
from .app_config import AppConfig  # noqa: E402


__all__ = ["Base", "User", "Workout", "Exercise", "Challenge", "Progress", "AppConfig"]
