"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.database.entity_mapper import EntityMapper

from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.mappers.technical_sheet_mapper import TechnicalSheetMapper
from src.app.infrastructure.mappers.appointment_mapper import AppointmentMapper

from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.technical_sheet_repository import TechnicalSheetRepository
from src.app.infrastructure.appointment_repository import AppointmentRepository

from src.app.core.services.client_service import ClientService
from src.app.core.services.technical_sheet_service import TechnicalSheetService
from src.app.core.services.appointment_service import AppointmentService
from src.app.core.services.dashboard_service import DashboardService

from src.app.core.domain.models import Appointment, Client, TechnicalSheet

WIRED_MODULES = [
    "src.app.api.dependencies",
    "src.app.api.v1.clients",
    "src.app.api.v1.technical_sheets",
    "src.app.api.v1.appointments",
    "src.app.api.v1.dashboard",
]


def create_entity_mapper(
    client_mapper: ClientMapper,
    technical_sheet_mapper: TechnicalSheetMapper,
    appointment_mapper: AppointmentMapper,
) -> EntityMapper:
    """Factory function to create EntityMapper with proper mappings."""
    return EntityMapper(
        entity_mappings={
            Client: client_mapper.to_entity,
            TechnicalSheet: technical_sheet_mapper.to_entity,
            Appointment: appointment_mapper.to_entity,
        }
    )


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(modules=WIRED_MODULES)

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETONS - Stateless Mappers (reusable across all requests)
    # =========================================================================
    client_mapper = providers.Singleton(ClientMapper)
    technical_sheet_mapper = providers.Singleton(TechnicalSheetMapper)
    appointment_mapper = providers.Singleton(AppointmentMapper)

    entity_mapper = providers.Singleton(
        create_entity_mapper,
        client_mapper=client_mapper,
        technical_sheet_mapper=technical_sheet_mapper,
        appointment_mapper=appointment_mapper,
    )

    # =========================================================================
    # SINGLETON - Database (the one shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
        max_attempts=config.provided.connection.max_attempts,
        retry_delay_seconds=config.provided.connection.retry_delay_seconds,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # FACTORIES - Repositories (per-request, share database singleton)
    # =========================================================================
    client_repository = providers.Factory(
        ClientRepository,
        db=database,
        mapper=client_mapper,
    )

    technical_sheet_repository = providers.Factory(
        TechnicalSheetRepository,
        db=database,
        mapper=technical_sheet_mapper,
    )

    appointment_repository = providers.Factory(
        AppointmentRepository,
        db=database,
        mapper=appointment_mapper,
    )

    # =========================================================================
    # FACTORY - Unit of Work (per-request)
    # =========================================================================
    unit_of_work = providers.Factory(
        UnitOfWork,
        db=database,
        entity_mapper=entity_mapper,
    )

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    client_service = providers.Factory(
        ClientService,
        repository=client_repository,
        unit_of_work=unit_of_work,
    )

    technical_sheet_service = providers.Factory(
        TechnicalSheetService,
        client_repository=client_repository,
        sheet_repository=technical_sheet_repository,
        unit_of_work=unit_of_work,
    )

    appointment_service = providers.Factory(
        AppointmentService,
        client_repository=client_repository,
        appointment_repository=appointment_repository,
        unit_of_work=unit_of_work,
    )

    dashboard_service = providers.Factory(
        DashboardService,
        client_repository=client_repository,
        appointment_repository=appointment_repository,
    )
