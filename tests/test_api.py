import pytest

from solver_api import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.get_json() == {"ok": True}


def test_puzzles(client):
    data = client.get("/puzzles").get_json()
    assert len(data["puzzles"]) == 11


def test_solve(client, classic, classic_solution):
    res = client.post("/solve", json={"puzzle": classic})
    assert res.status_code == 200
    data = res.get_json()
    assert data["validation"]["ok"] is True
    assert data["solver"]["ok"] is True
    assert data["solver"]["state"] == "SOLVED"
    assert data["solver"]["solution81"] == classic_solution
    assert data["solver"]["grid"][0] == [5, 3, 4, 6, 7, 8, 9, 1, 2]


def test_solve_accepts_multiline_puzzle(client, classic, classic_solution):
    pasted = "\n".join(classic[i:i + 9] for i in range(0, 81, 9))
    data = client.post("/solve", json={"puzzle": pasted}).get_json()
    assert data["solver"]["solution81"] == classic_solution


def test_solve_conflicting_clues(client, classic):
    data = client.post("/solve", json={"puzzle": "55" + classic[2:]}).get_json()
    assert data["validation"]["ok"] is False
    assert data["validation"]["conflicts"] == [
        {"r": 1, "c": 1, "digit": 5},
        {"r": 1, "c": 2, "digit": 5},
    ]
    assert data["solver"]["ok"] is False
    assert data["solver"]["state"] == "EXHAUSTED"
    assert data["solver"]["solution81"] is None
    assert data["solver"]["grid"] is None


@pytest.mark.parametrize("payload", [{}, {"puzzle": "123"}, {"puzzle": "a" * 81}, ["x"], "puzzle"])
def test_solve_malformed(client, payload):
    res = client.post("/solve", json=payload)
    assert res.status_code == 400
    assert "error" in res.get_json()
