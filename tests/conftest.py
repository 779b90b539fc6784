"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable, Generator, Iterator
from decimal import Decimal
from itertools import count

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from edufin.api.main import app
from edufin.config import reset_settings
from edufin.core.entities.line_item import LineItem, LineItemCandidate
from edufin.core.services.invoice_draft import InvoiceDraft
from edufin.core.services.line_item_store import LineItemStore
from edufin.infrastructure.gateway import reset_charge_gateway
from edufin.infrastructure.storage import reset_draft_repository


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Fresh settings and singletons per test, independent of any local .env."""
    for var in (
        "GATEWAY_IDEMPOTENCY_ENABLED",
        "GATEWAY_BASE_URL",
        "GATEWAY_API_KEY",
        "BILLING_CURRENCY",
        "BILLING_DEFAULT_DUE_DAYS",
        "DRAFTS_SUBMITTED_RETENTION_SECONDS",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    reset_draft_repository()
    reset_charge_gateway()
    yield
    app.dependency_overrides.clear()
    reset_settings()
    reset_draft_repository()
    reset_charge_gateway()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create sync test client."""
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Deterministic id factory: item-1, item-2, ..."""
    counter = count(1)
    return lambda: f"item-{next(counter)}"


@pytest.fixture
def store(sequential_ids) -> LineItemStore:
    return LineItemStore(id_factory=sequential_ids)


@pytest.fixture
def draft(sequential_ids) -> InvoiceDraft:
    return InvoiceDraft(draft_id="draft-1", id_factory=sequential_ids)


@pytest.fixture
def make_item() -> Callable[..., LineItem]:
    """Build a validated LineItem directly."""
    counter = count(1)

    def _make(
        quantity: int = 1,
        unit_price: str = "0",
        discount: str = "0",
        tax_rate: str = "0",
        description: str = "Item",
    ) -> LineItem:
        return LineItem(
            id=f"li-{next(counter)}",
            description=description,
            quantity=quantity,
            unit_price=Decimal(unit_price),
            discount=Decimal(discount),
            tax_rate=Decimal(tax_rate),
        )

    return _make


@pytest.fixture
def tuition_candidate() -> LineItemCandidate:
    """Scenario 1 item: 2 x 100.00, no discount, no tax."""
    return LineItemCandidate(
        description="MBA em Gestão Empresarial",
        quantity=2,
        unit_price="100.00",
    )


@pytest.fixture
def service_candidate() -> LineItemCandidate:
    """Scenario 2 item: 50.00 less 10.00 discount, 10% tax."""
    return LineItemCandidate(
        description="Consultoria Pedagógica",
        quantity=1,
        unit_price="50.00",
        discount="10.00",
        tax_rate=10,
    )
