"""
Test Configuration and Fixtures

Environment setup runs before any application import: settings and the log
sinks are built at import time.

Architecture:
- Unit tests (test/**/unit/): drive domain objects and use cases directly
- Integration tests (test/**/integration/): drive the FastAPI app through TestClient
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Registration flows complete without waiting in tests
    os.environ['PAYMENT_PROCESSING_DELAY_SECONDS'] = '0'
    os.environ['FREE_REGISTRATION_DELAY_SECONDS'] = '0'
    os.environ['CONFIRMATION_DELAY_SECONDS'] = '0'
    os.environ.setdefault('REGISTRATION_RESULT_TIMEOUT_SECONDS', '5')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.registration.domain.value_object.registrant import Registrant  # noqa: E402


STUDENT_ID = 'user_student_001'
OTHER_STUDENT_ID = 'user_student_002'


@pytest.fixture
def registrant() -> Registrant:
    return Registrant(
        user_id=STUDENT_ID,
        first_name='Aline',
        last_name='Uwase',
        email='aline.uwase@example.com',
        phone_number='+250788123456',
    )


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """
    Fresh application state per test.

    Entering the TestClient runs the lifespan, which wires the container and
    opens the background task group that registration runs execute in.
    """
    from src.main import app

    container.reset_singletons()
    with TestClient(app) as test_client:
        yield test_client
    container.reset_singletons()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {'X-User-Id': STUDENT_ID}


@pytest.fixture
def other_auth_headers() -> dict[str, str]:
    return {'X-User-Id': OTHER_STUDENT_ID}
