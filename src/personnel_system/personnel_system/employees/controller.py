from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .filters import normalize_list_filters
from .model import employee_from_dict, employee_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def _system_error(action: str, e: Exception):
        logger.exception("Lỗi hệ thống khi %s", action)
        if bool(app.config.get("DEBUG", False)):
            return jsonify({"success": False, "message": f"Lỗi hệ thống khi {action}: {e}"}), 500
        return jsonify({"success": False, "message": f"Lỗi hệ thống khi {action}"}), 500

    def _read_payload() -> dict:
        payload = request.get_json(silent=True)
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise ValidationError("Dữ liệu hồ sơ không hợp lệ")
        return payload

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        filters = normalize_list_filters(request.args)
        rows = service.list_rows(filters)
        return jsonify({"success": True, "data": rows, "count": len(rows)})

    @app.route("/api/employees/new", methods=["GET"], endpoint="new_employee_form")
    def new_employee_form():
        return jsonify({"success": True, "data": employee_to_dict(service.blank_form())})

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        try:
            return jsonify({"success": True, "data": employee_to_dict(service.get(employee_id))})
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        try:
            created = service.create(employee_from_dict(_read_payload()))
            return jsonify({"success": True, "message": "Thêm mới hồ sơ thành công", "data": employee_to_dict(created)}), 201
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception as e:
            return _system_error("thêm hồ sơ", e)

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: str):
        try:
            updated = service.update(employee_id, employee_from_dict(_read_payload()))
            return jsonify({"success": True, "message": "Cập nhật hồ sơ thành công", "data": employee_to_dict(updated)})
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception as e:
            return _system_error("cập nhật hồ sơ", e)

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        try:
            service.soft_delete(employee_id)
            return jsonify({"success": True, "message": "Đã chuyển trạng thái sang \"Nghỉ việc\""})
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404

    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    def list_departments():
        items = [{"id": d.dept_id, "name": d.dept_name} for d in container.references_repo.list_departments()]
        return jsonify({"success": True, "data": items})

    @app.route("/api/positions", methods=["GET"], endpoint="list_positions")
    def list_positions():
        items = [{"id": p.position_id, "name": p.position_name} for p in container.references_repo.list_positions()]
        return jsonify({"success": True, "data": items})
