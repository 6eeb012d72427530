from __future__ import annotations

import logging
from functools import wraps

from flask import current_app, jsonify

from ..core.exceptions import ClassificationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def api_errors(view):
    """Translate domain errors raised by services into JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except ClassificationError as e:
            return json_error(str(e), 502)
        except Exception as e:
            logger.exception("Unhandled error in %s", view.__name__)
            if bool(current_app.config.get("DEBUG", False)):
                return json_error(f"Internal error: {e}", 500)
            return json_error("Internal error", 500)

    return wrapper
