from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.database import Base


class TechnicalSheetEntity(Base):
    """SQLAlchemy model for the technical_sheets table."""
    __tablename__ = "technical_sheets"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # Plain column: deleting a client leaves its sheets in place
    client_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    datetime: Mapped[str] = mapped_column(String, nullable=False)
    rimel: Mapped[str] = mapped_column(String, nullable=False)
    gestante: Mapped[str] = mapped_column(String, nullable=False)

    procedimento_olhos: Mapped[str | None] = mapped_column(String, nullable=True)
    alergia: Mapped[str | None] = mapped_column(String, nullable=True)
    especificar_alergia: Mapped[str | None] = mapped_column(Text, nullable=True)
    tireoide: Mapped[str | None] = mapped_column(String, nullable=True)
    problema_ocular: Mapped[str | None] = mapped_column(String, nullable=True)
    especificar_ocular: Mapped[str | None] = mapped_column(Text, nullable=True)
    oncologico: Mapped[str | None] = mapped_column(String, nullable=True)
    dorme_lado: Mapped[str | None] = mapped_column(String, nullable=True)
    dorme_lado_posicao: Mapped[str | None] = mapped_column(String, nullable=True)
    problema_informar: Mapped[str | None] = mapped_column(Text, nullable=True)
    procedimento: Mapped[str | None] = mapped_column(String, nullable=True)
    mapping: Mapped[str | None] = mapped_column(String, nullable=True)
    estilo: Mapped[str | None] = mapped_column(String, nullable=True)
    modelo_fios: Mapped[str | None] = mapped_column(String, nullable=True)
    espessura: Mapped[str | None] = mapped_column(String, nullable=True)
    curvatura: Mapped[str | None] = mapped_column(String, nullable=True)
    adesivo: Mapped[str | None] = mapped_column(String, nullable=True)
    observacao: Mapped[str | None] = mapped_column(Text, nullable=True)
