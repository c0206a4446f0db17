from __future__ import annotations

import logging

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import today_local
from ..common.responses import domain_error_response, failure_response
from ..core.exceptions import DomainError
from ..container import Container
from .export import XLSX_MIMETYPE, write_csv, write_excel

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _report_args():
        return request.args.get("startDate"), request.args.get("endDate"), request.args.get("section")

    @app.route("/api/reports/summary", methods=["GET"], endpoint="report_summary")
    def report_summary():
        try:
            return jsonify(container.report_service.build_summary(*_report_args()).to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error building report summary")
            return failure_response("Failed to build report summary")

    @app.route("/api/export/excel", methods=["GET"], endpoint="export_excel")
    def export_excel():
        try:
            matrix = container.report_service.build_report(*_report_args())
            return send_file(
                write_excel(matrix),
                mimetype=XLSX_MIMETYPE,
                as_attachment=True,
                download_name=f"attendance-report-{today_local().isoformat()}.xlsx",
            )
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error exporting Excel report")
            return failure_response("Failed to export data")

    @app.route("/api/export/csv", methods=["GET"], endpoint="export_csv")
    def export_csv():
        try:
            matrix = container.report_service.build_report(*_report_args())
            filename = f"attendance-report-{today_local().isoformat()}.csv"
            return app.response_class(
                write_csv(matrix),
                mimetype="text/csv",
                headers={"Content-Disposition": f"attachment; filename={filename}"},
            )
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error exporting CSV report")
            return failure_response("Failed to export data")
