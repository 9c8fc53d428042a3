# fitclub_server/models/app_config.py

from sqlalchemy import Column, String, Text
from . import Base


class AppConfig(Base):
    __tablename__ = "app_config"

    key = Column(String, primary_key=True)
    value = Column(Text)
