from .database import init_db, get_session, make_engine
from .subject import Subject
from .attribute import Attribute

__all__ = ["init_db", "get_session", "make_engine", "Subject", "Attribute"]
