"""Use case to page through denormalized transactions."""

from budget_health.application.ports.budget_snapshot import BudgetSnapshotPort
from budget_health.domain.models import TransactionPage
from budget_health.domain.services.denormalization import (
    build_transaction_view,
    index_categories,
    sort_newest_first,
)
from budget_health.infrastructure.logging.logger import get_app_logger

DEFAULT_PAGE_SIZE = 20


class ListTransactionsUseCase:
    """List transactions with their category display data, newest first."""

    def __init__(self, budget_repository: BudgetSnapshotPort, logger=None) -> None:
        self._budget_repository = budget_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        page: int = 0,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> TransactionPage:
        """Return one page of transactions.

        Args:
            page: Zero-based page index.
            page_size: Number of transactions per page.

        Returns:
            TransactionPage: Items of the page; has_more is set when the page
            is full.

        Raises:
            ValueError: If page is negative or page_size is not positive.
        """
        if page < 0:
            raise ValueError(f"Page must be >= 0, got {page}")
        if page_size <= 0:
            raise ValueError(f"Page size must be > 0, got {page_size}")

        categories_by_id = index_categories(
            self._budget_repository.fetch_categories()
        )
        views = sort_newest_first(
            [
                build_transaction_view(transaction, categories_by_id)
                for transaction in self._budget_repository.fetch_transactions()
            ]
        )
        offset = page * page_size
        items = views[offset : offset + page_size]
        self._logger.debug(
            f"Listing transactions page {page}: {len(items)} of {len(views)}"
        )
        return TransactionPage(
            items=items,
            page=page,
            has_more=len(items) == page_size,
        )


__all__ = ["DEFAULT_PAGE_SIZE", "ListTransactionsUseCase"]
