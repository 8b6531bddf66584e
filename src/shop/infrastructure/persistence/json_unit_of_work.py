"""JSON-file-backed implementation of UnitOfWork.

On entry the unit of work takes the data directory's lock file and copies
the three data files into a scratch directory; the repositories are pointed
at the copies.  ``commit()`` moves the copies back over the originals;
anything else throws them away.

The lock is held until the ``with`` block ends.  It is an inter-process
file lock (``filelock``), and single-aggregate writes through the JSON
repositories take the same lock, so nothing written by another command can
be overwritten by a commit and two checkouts, even from separate ``shop``
processes, never pass the stock check on the same snapshot.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

import structlog

from shop.domain.repository.unit_of_work import UnitOfWork
from shop.infrastructure.persistence.json_basket_repository import JsonBasketRepository
from shop.infrastructure.persistence.json_order_repository import JsonOrderRepository
from shop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shop.infrastructure.persistence.json_repository import (
    DEFAULT_LOCK_TIMEOUT,
    directory_lock,
)

logger = structlog.get_logger(__name__)

PRODUCTS_FILE = "products.json"
BASKETS_FILE = "baskets.json"
ORDERS_FILE = "orders.json"
DATA_FILES = (PRODUCTS_FILE, BASKETS_FILE, ORDERS_FILE)


class JsonUnitOfWork(UnitOfWork):

    def __init__(
        self, data_dir: Path, lock_timeout: float = DEFAULT_LOCK_TIMEOUT
    ) -> None:
        self._data_dir = data_dir.resolve()
        self._lock = directory_lock(self._data_dir, lock_timeout)
        self._staging: Path | None = None
        self._committed = False

    def _begin(self) -> None:
        # Raises filelock.Timeout when another unit of work or writer keeps
        # the directory locked for longer than lock_timeout.
        self._lock.acquire()
        try:
            self._staging = Path(
                tempfile.mkdtemp(prefix=".uow-", dir=self._data_dir)
            )
            for name in DATA_FILES:
                source = self._data_dir / name
                if source.exists():
                    shutil.copy2(source, self._staging / name)
        except BaseException:
            self._lock.release()
            raise

        self._committed = False
        self.products = JsonProductRepository(self._staging / PRODUCTS_FILE)
        self.baskets = JsonBasketRepository(self._staging / BASKETS_FILE)
        self.orders = JsonOrderRepository(self._staging / ORDERS_FILE)

    def _end(self) -> None:
        try:
            if self._staging is not None:
                shutil.rmtree(self._staging, ignore_errors=True)
                self._staging = None
        finally:
            self._lock.release()

    def commit(self) -> None:
        if self._staging is None:
            raise RuntimeError("Unit of work is not active")
        for name in DATA_FILES:
            os.replace(self._staging / name, self._data_dir / name)
        self._committed = True
        logger.debug("uow.committed", data_dir=str(self._data_dir))

    def rollback(self) -> None:
        if self._committed:
            return
        logger.debug("uow.rolled_back", data_dir=str(self._data_dir))
