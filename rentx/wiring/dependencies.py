from functools import lru_cache
import logging
from zoneinfo import ZoneInfo

from rentx.core.config import settings
from rentx.application.ports.rental_api import RentalApiPort
from rentx.application.ports.selection_store import SelectionStorePort
from rentx.application.use_cases.cars import ListCarsUseCase, ListUserBookingsUseCase
from rentx.application.use_cases.scheduling import SchedulingUseCase
from rentx.application.use_cases.scheduling_details import SchedulingDetailsUseCase
from rentx.application.utils.platform_date import safe_timezone
from rentx.infrastructure.api.mock_api import MockRentalApi
from rentx.infrastructure.api.rentx_client import RentxApiClient
from rentx.infrastructure.store.memory_store import MemorySelectionStore


@lru_cache
def get_rental_api() -> RentalApiPort:
    logger = logging.getLogger(__name__)
    if not settings.RENTX_API_BASE_URL or settings.ENV.lower() in {"dev", "local"}:
        logger.info("Using MockRentalApi (base url missing or ENV=dev/local)")
        return MockRentalApi()
    logger.info("Using RentxApiClient", extra={"reason": settings.RENTX_API_BASE_URL})
    return RentxApiClient()


@lru_cache
def get_selection_store() -> SelectionStorePort:
    return MemorySelectionStore()


def get_timezone() -> ZoneInfo:
    return safe_timezone(settings.RENTX_TIMEZONE)


def get_user_id() -> int:
    return settings.RENTX_USER_ID


def get_scheduling_use_case() -> SchedulingUseCase:
    return SchedulingUseCase(store=get_selection_store())


def get_scheduling_details_use_case() -> SchedulingDetailsUseCase:
    return SchedulingDetailsUseCase(api=get_rental_api(), user_id=get_user_id())


def get_list_cars_use_case() -> ListCarsUseCase:
    return ListCarsUseCase(api=get_rental_api())


def get_list_user_bookings_use_case() -> ListUserBookingsUseCase:
    return ListUserBookingsUseCase(api=get_rental_api())
