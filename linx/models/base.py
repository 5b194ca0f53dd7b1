from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Declarative base for all SQLAlchemy ORM models.

    Models inheriting from it are registered in `Base.metadata` and are
    created by `init_db` at startup.
    """
    pass
