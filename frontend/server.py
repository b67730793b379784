"""
Flask web server for the Oracle assistant.
Provides the API endpoints consumed by the chat interface.
"""

import logging

from flask import Flask, jsonify, request

from core.knowledge_base import KnowledgeBaseUnavailableError
from core.prompts import (
    INTERNAL_ANSWER,
    INTERNAL_ERROR,
    INVALID_MESSAGE_ANSWER,
    INVALID_MESSAGE_ERROR,
    UNAVAILABLE_ANSWER,
    UNAVAILABLE_ERROR,
)

logger = logging.getLogger(__name__)


def create_app(assistant):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    @app.route("/api/assistant", methods=["POST"])
    def assistant_endpoint():
        """
        Q&A endpoint.
        Request:  {"message": "..."}
        Response: {"answer": "...", "categoria": "...", "titulo": "...", "source": "..."}
        """
        data = request.get_json(silent=True)
        message = data.get("message") if isinstance(data, dict) else None

        if not isinstance(message, str) or not message.strip():
            return jsonify({
                "error": INVALID_MESSAGE_ERROR,
                "answer": INVALID_MESSAGE_ANSWER,
            }), 400

        try:
            result = assistant.ask(message)
        except KnowledgeBaseUnavailableError:
            return jsonify({
                "error": UNAVAILABLE_ERROR,
                "answer": UNAVAILABLE_ANSWER,
            }), 500
        except Exception:
            logger.exception("Assistant endpoint failed")
            return jsonify({
                "error": INTERNAL_ERROR,
                "answer": INTERNAL_ANSWER,
            }), 500

        return jsonify({
            "answer": result["answer"],
            "categoria": result["categoria"],
            "titulo": result["titulo"],
            "source": result["source"],
        })

    @app.route("/api/suggestions", methods=["GET"])
    def suggestions():
        """Return the command suggestions shown on the welcome screen."""
        return jsonify(assistant.get_suggestions())

    @app.route("/api/stats", methods=["GET"])
    def stats():
        """Return assistant statistics."""
        try:
            return jsonify(assistant.get_stats())
        except Exception as e:
            logger.exception("Stats endpoint failed")
            return jsonify({"error": str(e)}), 500

    return app
