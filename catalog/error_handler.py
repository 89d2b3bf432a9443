"""Fallback payload for exceptions the catalog routes do not handle themselves."""
from typing import Any, Dict, Mapping, Optional
import logging

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "The catalog could not complete this request. Your session's products are unchanged."


class ErrorHandler:
    def handle_exception(
        self,
        exc: Exception,
        *,
        method: str = "",
        path: str = "",
        path_params: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Log ``exc`` with the session/product it hit and build the 500 body."""
        params = dict(path_params or {})
        session_id = params.get("session_id")
        product_id = _as_product_id(params.get("product_id"))
        logger.error(
            "Unhandled %s on %s %s (session=%s, product=%s): %s",
            type(exc).__name__,
            method,
            path,
            session_id,
            product_id,
            exc,
            exc_info=exc,
        )
        return {
            "success": False,
            "error": "internal_error",
            "error_type": type(exc).__name__,
            "message": INTERNAL_ERROR_MESSAGE,
            "route": {"method": method, "path": path},
            "session_id": session_id,
            "product_id": product_id,
        }


def _as_product_id(raw: Any) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None
