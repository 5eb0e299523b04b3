import pytest
from httpx import ASGITransport, AsyncClient

from orgcheck.api import create_app
from orgcheck.config import parse_settings


def _settings():
    return parse_settings(
        {
            "reporting": {
                "max_managers_to_root": 1,
                "min_salary_factor": 1.2,
                "max_salary_factor": 1.5,
            },
            "csv_source": {"default_source": "employees.csv", "max_record_count": 5},
        }
    )


@pytest.fixture
async def client():
    app = create_app(_settings())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


def _sample_employees() -> str:
    return """Id,firstName,lastName,salary,managerId
1,Big,Boss,100000,
2,Mid,Manager,72000,1
3,New,Hire,40000,2
"""


def _files(body: str) -> dict:
    return {"employees": ("employees.csv", body.encode("utf-8"), "text/csv")}


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_config(client: AsyncClient):
    resp = await client.get("/config")
    assert resp.status_code == 200
    assert resp.json()["reporting"]["max_managers_to_root"] == 1
    assert resp.json()["csv_source"]["max_record_count"] == 5


@pytest.mark.anyio
async def test_analyze_endpoint(client: AsyncClient):
    resp = await client.post("/analyze", files=_files(_sample_employees()))

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["long_reporting_lines"] == []
    assert payload["underpaid_managers"] == []
    assert len(payload["overpaid_managers"]) == 1
    assert payload["overpaid_managers"][0]["employee"]["id"] == 2
    assert payload["overpaid_managers"][0]["amount"] == pytest.approx(12000.0)


@pytest.mark.anyio
async def test_analyze_with_overrides(client: AsyncClient):
    resp = await client.post(
        "/analyze",
        files=_files(_sample_employees()),
        data={"max_salary_factor": "2.0", "min_salary_factor": "1.9"},
    )

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["overpaid_managers"] == []
    underpaid = {entry["employee"]["id"]: entry["amount"] for entry in payload["underpaid_managers"]}
    assert underpaid[2] == pytest.approx(4000.0)
    assert underpaid[1] == pytest.approx(36800.0)


@pytest.mark.anyio
async def test_analyze_reports_cycle(client: AsyncClient):
    body = "Id,firstName,lastName,salary,managerId\n1,A,B,1,\n2,C,D,1,3\n3,E,F,1,2\n"

    resp = await client.post("/analyze", files=_files(body))

    assert resp.status_code == 400
    assert resp.json()["detail"]["kind"] == "cycle_detected"


@pytest.mark.anyio
async def test_analyze_rejects_too_many_records(client: AsyncClient):
    rows = "".join(f"{i},A,B,1,1\n" for i in range(2, 8))
    body = "Id,firstName,lastName,salary,managerId\n1,A,B,1,\n" + rows

    resp = await client.post("/analyze", files=_files(body))

    assert resp.status_code == 400
    assert resp.json()["detail"]["kind"] == "source_too_large"


@pytest.mark.anyio
async def test_analyze_rejects_invalid_override(client: AsyncClient):
    resp = await client.post(
        "/analyze",
        files=_files(_sample_employees()),
        data={"max_managers_to_root": "0"},
    )

    assert resp.status_code == 422
    assert resp.json()["detail"]["kind"] == "configuration"


@pytest.mark.anyio
async def test_analyze_reports_empty_upload_as_source_unavailable(client: AsyncClient):
    resp = await client.post("/analyze", files=_files(""))

    assert resp.status_code == 400
    assert resp.json()["detail"]["kind"] == "source_unavailable"
