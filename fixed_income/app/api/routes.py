"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from fixed_income.app.render import chart_bars, table_rows
from fixed_income.core.projection import project
from fixed_income.schemas.ping import PingResponse
from fixed_income.schemas.projection import ProjectionRequest, ProjectionResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected projection payload: %s", exc)
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    logger.warning("malformed request body: %s", exc.description)
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", service=current_app.config["SERVICE_NAME"])
    return jsonify(response.model_dump())


@api_bp.get("/defaults")
def defaults() -> Any:
    """Form values the page resets to."""
    return jsonify(dict(current_app.config["DEFAULT_FORM"]))


@api_bp.post("/projection")
def projection() -> Any:
    """Compare every instrument for the submitted form values."""
    raw_payload = request.get_json(force=True, silent=False)
    if raw_payload is None:
        raw_payload = {}
    payload = ProjectionRequest.model_validate(raw_payload)
    projection_input = payload.to_projection_input()
    result = project(projection_input)

    config = current_app.config
    response = ProjectionResponse(
        input=projection_input,
        rows=result.rows,
        maxNetReturn=result.maxNetReturn,
        table=table_rows(result),
        chart=chart_bars(
            result,
            max_height=int(config["CHART_MAX_BAR_HEIGHT"]),
            min_height=int(config["CHART_MIN_BAR_HEIGHT"]),
        ),
    )
    return jsonify(response.model_dump())
