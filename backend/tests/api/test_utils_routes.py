from fastapi.testclient import TestClient

from linkup.core.config import settings


def test_health_check(client: TestClient):
    response = client.get(f"{settings.API_V1_STR}/utils/health-check/")
    assert response.status_code == 200
    assert response.json() is True
