# visadesk/tests/test_api.py
from fastapi.testclient import TestClient

from visadesk.main import app

client = TestClient(app)


def test_health():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["service"] == "visadesk"


def test_lifespan_starts_with_default_schedule():
    with TestClient(app) as c:
        assert c.get("/").status_code == 200


def test_scheme_catalogue():
    r = client.get("/visa/schemes")
    assert r.status_code == 200
    data = r.json()
    assert data["policyYear"] == 2026
    ids = [s["schemeId"] for s in data["schemes"]]
    assert ids == ["F-2-7", "E-7", "D-10", "F-5", "F-6", "D-2", "E-9", "D-8"]
    f27 = data["schemes"][0]
    assert (f27["passingScore"], f27["maxScore"]) == (80, 120)
    assert f27["categories"] == ["기본항목", "가산항목"]
    assert "categories" not in data["schemes"][2]


def test_evaluate_score_scheme_camel_case():
    r = client.post("/visa/evaluate", json={
        "schemeId": "F-2-7",
        "profile": {"age": 27, "education": "masters", "topikLevel": 5, "annualIncome": 7000},
    })
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["schemeId"] == "F-2-7"
    assert data["totalScore"] == sum(c["score"] for c in data["breakdown"])
    assert data["isPassing"] == (data["totalScore"] >= data["passingScore"])
    assert "maxScore" in data["breakdown"][0]
    assert "interviewLikelihood" in data["processing"]
    assert isinstance(data["improvementTips"], list)
    for route in data["pathways"]:
        assert route["edges"][0]["from"] == "F-2-7"


def test_evaluate_checklist_scheme():
    r = client.post("/visa/evaluate", json={
        "schemeId": "E-9",
        "profile": {
            "age": 25, "epsTopikScore": 150, "passedSkillsTest": True, "hasCriminalRecord": True,
            "passedHealthCheck": True, "mouCountry": True, "hasEmploymentContract": True,
            "passportValidMonths": 24,
        },
    })
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["eligible"] is False
    assert data["eligibilityScore"] == 90
    assert data["subType"] == "manufacturing"


def test_evaluate_with_policy_year():
    r = client.post("/visa/evaluate", json={
        "schemeId": "F-2-7", "profile": {"age": 30}, "policyYear": 2024,
    })
    assert r.status_code == 200
    assert r.json()["policyYear"] == 2024


def test_unknown_policy_year_is_configuration_error():
    r = client.post("/visa/evaluate", json={
        "schemeId": "F-2-7", "profile": {"age": 30}, "policyYear": 1999,
    })
    assert r.status_code == 400
    assert r.json()["error"] == "CONFIGURATION_ERROR"
    assert r.json()["field"] == "policyYear"


def test_unknown_scheme():
    r = client.post("/visa/evaluate", json={"schemeId": "Z-1", "profile": {}})
    assert r.status_code == 400
    assert r.json() == {
        "error": "UNKNOWN_SCHEME",
        "detail": "unsupported scheme id 'Z-1'",
        "field": "schemeId",
    }


def test_invalid_profile_field():
    r = client.post("/visa/evaluate", json={"schemeId": "F-2-7", "profile": {"age": 12}})
    assert r.status_code == 422
    assert r.json()["error"] == "VALIDATION_ERROR"
    assert r.json()["field"] == "age"


def test_malformed_body():
    r = client.post("/visa/evaluate", json={"profile": {"age": 30}})
    assert r.status_code == 422
    assert r.json()["error"] == "VALIDATION_ERROR"
    assert r.json()["field"].endswith("schemeId")


def test_pathways_endpoint():
    r = client.get("/visa/pathways", params={"current": "E-7", "target": "F-5"})
    assert r.status_code == 200
    routes = r.json()["routes"]
    assert routes[0]["totalYears"] == 4.0
    assert [e["to"] for e in routes[0]["edges"]] == ["F-2-7", "F-5-16"]
    assert routes[0]["difficulty"] == "moderate"


def test_pathways_requires_both_ends():
    r = client.get("/visa/pathways", params={"current": "E-7"})
    assert r.status_code == 422


def test_pathways_unknown_id():
    r = client.get("/visa/pathways", params={"current": "E7", "target": "F5"})
    assert r.status_code == 400
    assert r.json() == {
        "error": "UNKNOWN_SCHEME",
        "detail": "unsupported scheme id 'E7'",
        "field": "current",
    }
