from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.responses import domain_error_response, failure_response, json_body
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        try:
            record = container.attendance_service.mark_from_payload(request.get_json(silent=True))
            return jsonify(record.to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error marking attendance")
            return failure_response("Failed to mark attendance")

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="bulk_mark_attendance")
    def bulk_mark_attendance():
        try:
            result = container.attendance_service.bulk_mark(json_body().get("attendanceRecords"))
            return jsonify(result.to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error marking bulk attendance")
            return failure_response("Failed to mark bulk attendance")

    @app.route("/api/attendance/<day>", methods=["GET"], endpoint="attendance_by_date")
    def attendance_by_date(day: str):
        try:
            rows = container.attendance_service.get_by_date(day, request.args.get("section"))
            return jsonify([r.to_dict() for r in rows])
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error fetching attendance for %s", day)
            return failure_response("Failed to fetch attendance")

    @app.route("/api/attendance/range/<start>/<end>", methods=["GET"], endpoint="attendance_range")
    def attendance_range(start: str, end: str):
        try:
            rows = container.attendance_service.get_by_range(start, end, request.args.get("section"))
            return jsonify([r.to_dict() for r in rows])
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error fetching attendance range %s..%s", start, end)
            return failure_response("Failed to fetch attendance range")
