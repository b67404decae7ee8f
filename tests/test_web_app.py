import pytest
from fastapi import HTTPException

from teknonymy.web.app import app, api_teknonym, info


def test_openapi_schema_callable():
    schema = app.openapi()
    assert isinstance(schema, dict)
    assert "/api/teknonym" in schema["paths"]


def test_routes_include_api_and_root():
    paths = {getattr(r, "path", None) for r in app.routes}
    assert "/" in paths
    assert "/api/teknonym" in paths


def test_info():
    data = info()
    assert data["service"] == "teknonymy"
    assert data["strategy"] in ("breadth_first", "depth_first")


def test_api_teknonym(three_generations):
    resp = api_teknonym(three_generations.to_dict())
    assert resp == {"teknonym": "grandfather of Tom", "descendant": "Tom", "depth": 2}


def test_api_teknonym_leaf():
    resp = api_teknonym({"name": "John", "sex": "M", "birth_date": "1046-01-01"})
    assert resp == {"teknonym": "", "descendant": None, "depth": 0}


def test_api_teknonym_rejects_malformed_tree():
    with pytest.raises(HTTPException) as exc:
        api_teknonym({"name": "John", "sex": "M", "birth_date": "yesterday"})
    assert exc.value.status_code == 400


def test_api_teknonym_mixed_naive_and_offset_dates():
    doc = {
        "name": "R",
        "sex": "F",
        "birth_date": "1900-01-01",
        "children": [
            {"name": "A", "sex": "F", "birth_date": "1950-01-01"},
            {"name": "B", "sex": "M", "birth_date": "1950-01-01T01:00:00+02:00"},
        ],
    }
    assert api_teknonym(doc) == {"teknonym": "mother of B", "descendant": "B", "depth": 1}


def test_api_teknonym_tall_tree():
    doc = {"name": "Leaf", "sex": "F", "birth_date": "2000-01-01"}
    for i in range(2999, -1, -1):
        doc = {"name": f"G{i}", "sex": "M", "birth_date": "1900-01-01", "children": [doc]}
    resp = api_teknonym(doc)
    assert resp["depth"] == 3000
    assert resp["descendant"] == "Leaf"
    assert resp["teknonym"] == "great-" * 2998 + "grandfather of Leaf"
