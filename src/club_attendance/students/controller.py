from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.responses import domain_error_response, failure_response, json_body
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        try:
            students = container.student_service.list_students(request.args.get("section"))
            return jsonify([s.to_dict() for s in students])
        except Exception:
            logger.exception("Error fetching students")
            return failure_response("Failed to fetch students")

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    def create_student():
        try:
            student = container.student_service.create_student(request.get_json(silent=True))
            return jsonify(student.to_dict()), 201
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error creating student")
            return failure_response("Failed to create student")

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: str):
        try:
            return jsonify(container.student_service.get_student(student_id).to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error fetching student %s", student_id)
            return failure_response("Failed to fetch student")

    @app.route("/api/students/<student_id>", methods=["PUT"], endpoint="update_student")
    def update_student(student_id: str):
        try:
            student = container.student_service.update_student(student_id, request.get_json(silent=True))
            return jsonify(student.to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error updating student %s", student_id)
            return failure_response("Failed to update student")

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: str):
        try:
            container.student_service.delete_student(student_id)
            return jsonify({"message": "Student deleted successfully"})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error deleting student %s", student_id)
            return failure_response("Failed to delete student")

    @app.route("/api/students/bulk", methods=["POST"], endpoint="bulk_create_students")
    def bulk_create_students():
        try:
            result = container.student_service.bulk_create(json_body().get("students"))
            body = result.to_dict()
            body.pop("skipped")
            return jsonify(body)
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error in bulk student import")
            return failure_response("Failed to import students")

    @app.route("/api/students/import/sheet", methods=["POST"], endpoint="import_students_from_sheet")
    def import_students_from_sheet():
        try:
            result = container.student_service.import_from_sheet(json_body().get("url"))
            return jsonify(result.to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error importing students from sheet")
            return failure_response("Failed to import students")

    @app.route("/api/students/<student_id>/attendance", methods=["GET"], endpoint="student_attendance")
    def student_attendance(student_id: str):
        try:
            records = container.attendance_service.get_for_student(
                student_id,
                start=request.args.get("startDate"),
                end=request.args.get("endDate"),
            )
            return jsonify([r.to_dict() for r in records])
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error fetching attendance for student %s", student_id)
            return failure_response("Failed to fetch attendance")
