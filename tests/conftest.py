"""Shared fixtures: settings pointed at tmp dirs and a spy form route group."""

from __future__ import annotations

import dataclasses

import pytest
from flask import Blueprint, g, jsonify, request

from app import create_app
from config import Settings


@pytest.fixture
def calls():
    return []


@pytest.fixture
def spy_routes(calls):
    """Stand-in form route group recording every handler invocation."""
    bp = Blueprint("form", __name__)

    @bp.route("/echo", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
    def echo():
        calls.append(request.method)
        return jsonify(body=g.body, scheme=request.scheme, cookies=dict(request.cookies))

    @bp.get("/boom")
    def boom():
        calls.append("boom")
        raise RuntimeError("database password is hunter2")

    return bp


@pytest.fixture
def make_settings(tmp_path):
    def _make(**overrides) -> Settings:
        base = Settings(
            upload_dir=tmp_path / "uploads",
            database_path=tmp_path / "db" / "app.db",
        )
        return dataclasses.replace(base, **overrides)

    return _make


@pytest.fixture
def make_client(make_settings, spy_routes):
    def _make(**overrides):
        flask_app = create_app(make_settings(**overrides), form_routes=spy_routes)
        return flask_app.test_client()

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
