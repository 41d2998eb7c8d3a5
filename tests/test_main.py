from __future__ import annotations

import pytest
import responses

from pim_admin_app.main import run

BASE = "https://pim.example.com/api/"


@pytest.fixture(autouse=True)
def _backend_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PIM_API_BASE_URL", BASE)
    monkeypatch.setenv("PIM_CLOCK_INTERVAL_SECONDS", "60")


@responses.activate
def test_run_prints_products(capsys: pytest.CaptureFixture[str]) -> None:
    responses.add(responses.POST, f"{BASE}auth/login", json={"success": True, "data": {"accessToken": "abc123"}})
    responses.add(
        responses.GET,
        f"{BASE}products",
        json={"success": True, "data": [{"id": "1", "sku": "MUG", "name": "Mug", "price": 2.5, "quantity": 3, "status": "draft"}]},
    )

    assert run(["--email", "ops@test.com", "--password", "secret"]) == 0

    out = capsys.readouterr().out
    assert "Loaded 1 products" in out
    assert "1\tMUG\tMug\t2.5\t3\tdraft" in out
    assert b'"email": "ops@test.com"' in responses.calls[0].request.body


@responses.activate
def test_run_reports_login_failure(capsys: pytest.CaptureFixture[str]) -> None:
    responses.add(responses.POST, f"{BASE}auth/login", json={"success": False, "message": "Account locked"})

    assert run([]) == 1
    assert "Login failed: Account locked" in capsys.readouterr().out
