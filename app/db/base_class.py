# /app/db/base_class.py

from sqlalchemy.orm import declarative_base, declared_attr


class _TableNameMixin:
    # Table names default to the lowercased class name plus "s".
    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower() + "s"


Base = declarative_base(cls=_TableNameMixin)
