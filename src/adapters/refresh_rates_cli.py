"""CLI adapter to refresh cached exchange rates."""

from datetime import datetime

from src.application.use_cases.refresh_rates import RefreshRatesUseCase
from src.domain.services.fx import format_last_updated
from src.infrastructure.container import build_rates_source, build_rates_store
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def main() -> None:
    """Refresh rates and report when they were last updated."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    store = build_rates_store()
    use_case = RefreshRatesUseCase(
        source=build_rates_source(settings),
        store=store,
        symbols=settings.rates_symbols,
        logger=logger,
    )

    refreshed = use_case.execute(datetime.now())

    rate_table = store.load_rate_table()
    status = "Rates updated" if refreshed else "Rate update failed"
    print(
        f"{status}. Last updated: "
        f"{format_last_updated(rate_table.last_updated, datetime.now())}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
