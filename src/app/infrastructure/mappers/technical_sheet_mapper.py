from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import TechnicalSheet
from src.app.infrastructure.entities.technical_sheet_entity import TechnicalSheetEntity


class TechnicalSheetMapper(BaseEntityMapper[TechnicalSheet, TechnicalSheetEntity]):
    """Mapper for converting between TechnicalSheet and TechnicalSheetEntity."""

    @staticmethod
    def to_entity(model_instance: TechnicalSheet) -> TechnicalSheetEntity:
        # Field names are identical on both sides
        return TechnicalSheetEntity(**model_instance.model_dump())

    @staticmethod
    def to_model(entity: TechnicalSheetEntity) -> TechnicalSheet:
        return TechnicalSheet.model_validate(entity)
