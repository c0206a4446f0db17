from __future__ import annotations

from flask import jsonify, request

from ..core.exceptions import ConflictError, DomainError, NotFoundError, UpstreamError, ValidationError


def domain_error_response(e: DomainError):
    """Map a domain exception to a JSON error response."""

    body = {"message": str(e)}
    if isinstance(e, ValidationError):
        if e.errors:
            body["errors"] = e.errors
        return jsonify(body), 400
    if isinstance(e, NotFoundError):
        return jsonify(body), 404
    if isinstance(e, ConflictError):
        return jsonify(body), 400
    if isinstance(e, UpstreamError):
        return jsonify(body), 502
    return jsonify(body), 400


def failure_response(message: str):
    return jsonify({"message": message}), 500


def json_body() -> dict:
    """Request JSON as a dict, or an empty dict when the body is missing or not JSON."""

    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
