"""API tests using FastAPI's TestClient."""

import importlib

import pytest
from fastapi.testclient import TestClient
from loguru import logger

import api
from api import app


@pytest.fixture(scope="module")
def client():
	return TestClient(app)


def test_health(client):
	resp = client.get("/health")
	assert resp.status_code == 200
	assert resp.json() == {"status": "ok", "parser_ready": True}


def test_interpret(client):
	resp = client.get("/interpret", params={"q": "Toyota Camry"})
	assert resp.status_code == 200
	body = resp.json()
	assert body["originalQuery"] == "Toyota Camry"
	assert body["interpretedAs"] == "Make: Toyota · Model: camry"
	assert body["filters"] == {"query": "camry", "make": "Toyota", "model": "camry"}
	assert body["elapsed_ms"] >= 0


def test_interpret_ranges_and_conditions(client):
	body = client.get("/interpret", params={"q": "used cars 2015-2020 under 150k near Hamilton"}).json()
	f = body["filters"]
	assert f["yearMin"] == 2015
	assert f["yearMax"] == 2020
	assert f["odometerMax"] == 150000
	assert "priceMax" not in f
	assert f["condition"] == ["Fair"]
	assert f["location"] == "Hamilton"


def test_interpret_empty_query(client):
	resp = client.get("/interpret", params={"q": ""})
	assert resp.status_code == 200
	body = resp.json()
	assert body["filters"] == {"query": ""}
	assert "interpretedAs" not in body


def test_interpret_requires_q(client):
	assert client.get("/interpret").status_code == 422


def test_search_url(client):
	resp = client.get("/search-url", params={"q": "sony camera", "preferred_location": "Wellington"})
	assert resp.status_code == 200
	url = resp.json()["url"]
	assert url.startswith("/search?q=sony+camera")
	assert "location=Wellington" in url

	assert client.get("/search-url", params={"q": "  "}).json() == {"url": "/search"}


def test_import_keeps_existing_log_sinks():
	messages = []
	sink_id = logger.add(messages.append, level="DEBUG")
	try:
		importlib.reload(api)
		logger.info("[Test] sink still attached")
	finally:
		logger.remove(sink_id)
	assert any("sink still attached" in m for m in messages)
