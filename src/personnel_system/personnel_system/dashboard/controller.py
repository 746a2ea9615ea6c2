from __future__ import annotations

import logging
from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        evaluation_date = None
        on = (request.args.get("on") or "").strip()
        if on:
            try:
                evaluation_date = parse_iso_date(on)
            except ValueError:
                return jsonify({"success": False, "message": "Ngày không hợp lệ (YYYY-MM-DD)"}), 400

        try:
            data = container.dashboard_service.build_dashboard(evaluation_date=evaluation_date)
        except Exception as e:
            logger.exception("Lỗi hệ thống khi tải bảng điều khiển")
            message = "Lỗi hệ thống khi tải bảng điều khiển"
            if bool(app.config.get("DEBUG", False)):
                message = f"{message}: {e}"
            return jsonify({"success": False, "message": message}), 500
        return jsonify({"success": True, "data": asdict(data)})
