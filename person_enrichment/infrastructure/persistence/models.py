from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class Person:
    __tablename__ = "people"

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    surname: Mapped[str] = mapped_column(String(255))
    patronymic: Mapped[str] = mapped_column(String(255), default="", server_default="")
    age: Mapped[int] = mapped_column(default=0, server_default="0")
    gender: Mapped[str] = mapped_column(String(64), default="", server_default="")
    nationality: Mapped[str] = mapped_column(String(8), default="", server_default="")
