import json
from datetime import date
from decimal import Decimal
from uuid import UUID

import pytest

from appdoc.model import Application, ApplicationState, Fund, Person, Product, Review
from appdoc.store import InMemoryApplicationStore

PENDING_ID = UUID("7d1f3b5e-0c1a-4f4e-9a43-2f3d1b0c9e01")
ACTIVATED_ID = UUID("7d1f3b5e-0c1a-4f4e-9a43-2f3d1b0c9e02")
IN_REVIEW_ID = UUID("7d1f3b5e-0c1a-4f4e-9a43-2f3d1b0c9e03")
CLOSED_ID = UUID("7d1f3b5e-0c1a-4f4e-9a43-2f3d1b0c9e04")
MISSING_ID = UUID("7d1f3b5e-0c1a-4f4e-9a43-2f3d1b0c9eff")


def make_products():
    return [
        Product(product_id="P01", name="Retirement Annuity", funds=[
            Fund(fund_id="F01", name="Balanced Fund", amount=Decimal("1000.00"), fees=Decimal("100.00")),
            Fund(fund_id="F02", name="Equity Fund", amount=Decimal("500.00"), fees=Decimal("50.00")),
        ]),
        Product(product_id="P02", name="Tax Free Savings", funds=[
            Fund(fund_id="F03", name="Money Market", amount=Decimal("250.00"), fees=Decimal("0")),
        ]),
    ]


def make_application(application_id, state, **kwargs):
    data = dict(
        id=application_id,
        reference_number=f"REF-{str(application_id)[-2:]}",
        state=state,
        person=Person(first_name="Thandi", surname="Mokoena"),
        date=date(2024, 3, 15),
        products=make_products(),
    )
    data.update(kwargs)
    return Application(**data)


@pytest.fixture
def pending_application():
    return make_application(PENDING_ID, ApplicationState.PENDING)


@pytest.fixture
def activated_application():
    return make_application(
        ACTIVATED_ID, ApplicationState.ACTIVATED,
        is_legal_entity=True, legal_entity="Mokoena Holdings (Pty) Ltd",
    )


@pytest.fixture
def in_review_application():
    return make_application(
        IN_REVIEW_ID, ApplicationState.IN_REVIEW,
        current_review=Review(reason="Proof of address outstanding", reviewed_by="ops", reviewed_on=date(2024, 3, 20)),
    )


@pytest.fixture
def closed_application():
    return make_application(CLOSED_ID, ApplicationState.CLOSED)


@pytest.fixture
def store(pending_application, activated_application, in_review_application, closed_application):
    return InMemoryApplicationStore([
        pending_application, activated_application, in_review_application, closed_application
    ])


@pytest.fixture
def fixture_file(tmp_path, store):
    path = tmp_path / "applications.json"
    records = [
        json.loads(store.fetch(_id).model_dump_json())
        for _id in (PENDING_ID, ACTIVATED_ID, IN_REVIEW_ID, CLOSED_ID)
    ]
    path.write_text(json.dumps(records))
    return path
