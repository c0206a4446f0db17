from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.responses import domain_error_response, failure_response
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stats", methods=["GET"], endpoint="stats")
    def stats():
        try:
            return jsonify(container.stats_service.compute_stats(request.args.get("date")).to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error fetching stats")
            return failure_response("Failed to fetch statistics")
