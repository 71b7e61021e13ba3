import pytest

from licensing.services import PaymentService, UserService


@pytest.fixture
def payment_service(db_session):
    return PaymentService(db_session)


@pytest.fixture
def user_service(db_session):
    return UserService(db_session)
