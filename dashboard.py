"""
Dashboard — Flask JSON API over the orchestrator.

Provides:
  - Current display state (weather, error message, history)
  - Search, clear, replay-from-history, delete-from-history
  - One JSON shape for every response: the display state

Runs in a background thread alongside the Telegram bot.
"""

import asyncio

from flask import Flask, request, jsonify

from config import DASHBOARD_SECRET
from models import Location


_orchestrator = None  # set via create_app()


def _run(coro):
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def _search_response(result):
    body = _orchestrator.state().to_dict()
    body["ok"] = result.ok
    return jsonify(body)


def create_app(orchestrator):
    global _orchestrator
    _orchestrator = orchestrator

    app = Flask(__name__)
    app.secret_key = DASHBOARD_SECRET

    @app.route("/api/state", methods=["GET"])
    def api_state():
        return jsonify(_orchestrator.state().to_dict())

    @app.route("/api/history", methods=["GET"])
    def api_history():
        return jsonify([e.to_dict() for e in _orchestrator.state().history])

    @app.route("/api/search", methods=["POST"])
    def api_search():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        # null fields count as blank
        location = Location(
            city=str(data.get("city") or ""),
            country=str(data.get("country") or ""),
        )
        return _search_response(_run(_orchestrator.search(location)))

    @app.route("/api/clear", methods=["POST"])
    def api_clear():
        return jsonify(_orchestrator.clear().to_dict())

    @app.route("/api/history/<int:index>/search", methods=["POST"])
    def api_replay(index):
        entry = _orchestrator.history_entry(index)
        if not entry:
            return jsonify({"error": "not found"}), 404
        return _search_response(_run(_orchestrator.search_from_history(entry)))

    @app.route("/api/history/<int:index>/delete", methods=["POST"])
    def api_delete(index):
        return jsonify(_orchestrator.delete_history(index).to_dict())

    return app
