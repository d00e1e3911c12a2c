"""
Store lifecycle: schema sync and one-time seeding of default data.

Runs once at application startup, before uvicorn binds its socket.
The seed decision is read from the store (empty products table), so a
restart against a populated database never inserts duplicates.
"""
import asyncio
import enum
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

from sqlalchemy import insert
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from database import Base
from Common_module.datetime_utils import now_utc, offset_ms
from Gateway_module.errors import StartupError
from Product_module.Product_model import Product
from DeliveryOption_module.DeliveryOption_model import DeliveryOption
from Cart_module.Cart_model import CartItem
from Orders_module.Order_model import Order
from .default_data import (
    DEFAULT_PRODUCTS,
    DEFAULT_DELIVERY_OPTIONS,
    DEFAULT_CART,
    DEFAULT_ORDERS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DefaultDataset:
    name: str
    model: type
    records: Tuple[dict, ...]


# Insertion order matters: cart items and orders reference products/options
DEFAULT_DATASETS = (
    DefaultDataset("products", Product, DEFAULT_PRODUCTS),
    DefaultDataset("delivery_options", DeliveryOption, DEFAULT_DELIVERY_OPTIONS),
    DefaultDataset("cart_items", CartItem, DEFAULT_CART),
    DefaultDataset("orders", Order, DEFAULT_ORDERS),
)


class LifecycleState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    SCHEMA_SYNCED = "schema_synced"
    SEED_CHECKED = "seed_checked"
    READY = "ready"


class StartupCancelled(StartupError):
    """Startup gave up (timeout) while the store work was still running."""


def stamp_records(records, base_timestamp: datetime) -> List[dict]:
    """
    Copy each template and give it createdAt/updatedAt = base + index ms.

    Index restarts at 0 for every dataset, so timestamps within one bulk insert
    are distinct and follow record order even on a coarse clock.
    """
    stamped = []
    for index, record in enumerate(records):
        timestamp = offset_ms(base_timestamp, index)
        stamped.append({**record, "created_at": timestamp, "updated_at": timestamp})
    return stamped


def bulk_insert_dataset(
    session: Session,
    dataset: DefaultDataset,
    base_timestamp: datetime,
    should_stop: Optional[Callable[[], bool]] = None,
) -> int:
    """Insert one dataset in a single transaction; nothing is kept if it fails."""
    rows = stamp_records(dataset.records, base_timestamp)
    if not rows:
        return 0
    try:
        session.execute(insert(dataset.model), rows)
        if should_stop is not None and should_stop():
            raise StartupCancelled(f"Seeding cancelled before committing {dataset.name}")
        session.commit()
    except Exception:
        session.rollback()
        raise
    logger.info("Inserted %s default %s", len(rows), dataset.name)
    return len(rows)


def seed_default_data(
    session: Session,
    base_timestamp: Optional[datetime] = None,
    datasets=DEFAULT_DATASETS,
    should_stop: Optional[Callable[[], bool]] = None,
) -> Dict[str, int]:
    """
    Insert every default dataset in order and return row counts by dataset name.
    One base timestamp is shared by all datasets.

    ``should_stop`` is polled before and inside each dataset's transaction;
    once it returns True no further dataset is committed.
    """
    if base_timestamp is None:
        base_timestamp = now_utc()
    counts = {}
    for dataset in datasets:
        if should_stop is not None and should_stop():
            raise StartupCancelled(f"Seeding cancelled before {dataset.name}")
        counts[dataset.name] = bulk_insert_dataset(session, dataset, base_timestamp, should_stop)
    return counts


class StoreLifecycleManager:
    """
    UNINITIALIZED -> SCHEMA_SYNCED -> SEED_CHECKED -> READY.

    Any failure along the way is raised as StartupError and the manager
    stays in the state it had reached. ``cancel()`` may be called from
    another thread; the manager stops at its next step boundary.
    """

    def __init__(
        self,
        engine: Engine,
        session_factory: sessionmaker,
        datasets=DEFAULT_DATASETS,
        clock: Callable[[], datetime] = now_utc,
    ):
        self.engine = engine
        self.session_factory = session_factory
        self.datasets = datasets
        self.clock = clock
        self.state = LifecycleState.UNINITIALIZED
        self.seed_counts: Dict[str, int] = {}
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def _check_cancelled(self, step: str) -> None:
        if self.cancelled:
            logger.warning("Store initialization cancelled %s (state: %s)", step, self.state.value)
            raise StartupCancelled(f"Store initialization cancelled {step}")

    def sync_schema(self) -> None:
        # create_all only issues CREATE for missing tables
        Base.metadata.create_all(bind=self.engine)
        self.state = LifecycleState.SCHEMA_SYNCED
        logger.info("Database schema synchronized")

    def needs_seed(self, session: Session) -> bool:
        product_count = session.query(Product).count()
        logger.info("Found %s product(s) in the database", product_count)
        return product_count == 0

    def initialize(self) -> bool:
        """
        Sync schema and seed if the products table is empty.
        Returns True when default data was inserted.
        """
        if self.state != LifecycleState.UNINITIALIZED:
            raise StartupError(f"Store lifecycle already ran (state: {self.state.value})")

        self._check_cancelled("before schema synchronization")
        try:
            self.sync_schema()
        except Exception as exc:
            logger.error("Schema synchronization failed: %s", exc, exc_info=True)
            raise StartupError("Schema synchronization failed") from exc

        seeded = False
        try:
            with self.session_factory() as session:
                self._check_cancelled("before the seed check")
                should_seed = self.needs_seed(session)
                self._check_cancelled("after the seed check")
                self.state = LifecycleState.SEED_CHECKED
                if should_seed:
                    self.seed_counts = seed_default_data(
                        session,
                        base_timestamp=self.clock(),
                        datasets=self.datasets,
                        should_stop=self._cancelled.is_set,
                    )
                    seeded = True
        except StartupError:
            raise
        except Exception as exc:
            logger.error("Seeding default data failed: %s", exc, exc_info=True)
            raise StartupError("Seeding default data failed") from exc

        if seeded:
            logger.info("Default data added to the database: %s", self.seed_counts)
        else:
            logger.info("Existing data found, skipping default data")

        self.state = LifecycleState.READY
        return seeded


def _start_daemon_worker(loop: asyncio.AbstractEventLoop, func: Callable[[], bool]) -> asyncio.Future:
    """
    Run ``func`` in a daemon thread and resolve a future on ``loop`` with its outcome.

    Unlike the loop's default executor, nothing joins this thread at shutdown,
    so an abandoned worker cannot hold the process open.
    """
    future = loop.create_future()

    def resolve(setter, value):
        if not future.done():
            setter(value)

    def worker():
        try:
            result = func()
        except Exception as exc:
            outcome = (future.set_exception, exc)
        else:
            outcome = (future.set_result, result)
        try:
            loop.call_soon_threadsafe(resolve, *outcome)
        except RuntimeError:
            # The loop closed after startup gave up on this worker
            logger.info("Store initialization worker finished after startup ended: %r", outcome[1])

    threading.Thread(target=worker, name="store-lifecycle", daemon=True).start()
    return future


async def run_startup(manager: StoreLifecycleManager, timeout: Optional[float] = None) -> bool:
    """
    Run the blocking lifecycle in a worker thread, bounded by ``timeout`` seconds.

    On timeout the manager is cancelled, so it commits nothing further once
    its current database call returns.
    """
    loop = asyncio.get_running_loop()
    try:
        return await asyncio.wait_for(_start_daemon_worker(loop, manager.initialize), timeout=timeout)
    except asyncio.TimeoutError as exc:
        manager.cancel()
        logger.error("Database initialization did not finish within %ss", timeout)
        raise StartupError(f"Database initialization timed out after {timeout}s") from exc
