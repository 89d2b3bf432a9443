"""
Session and view state management for the catalog API
"""

from typing import Any, Dict, Optional
from datetime import datetime, timezone
import uuid

from catalog.integrations.contracts.interfaces import ProductCatalogueClient, SortOption
from catalog.views.product_detail import ProductDetailView
from catalog.views.product_list import ProductListView


class SessionNotFound(KeyError):
    pass


class StateManager:
    """Keeps one list view and any opened detail views per browser session, in process memory."""

    def __init__(self, client: ProductCatalogueClient, default_sort: str = SortOption.ALPHABETICAL.value):
        self.client = client
        self.default_sort = default_sort
        self._sessions: Dict[str, Dict[str, Any]] = {}

    def create_session(self) -> str:
        """Create new session"""
        session_id = str(uuid.uuid4())
        self._sessions[session_id] = {
            "session_id": session_id,
            "list_view": None,
            "detail_views": {},
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        return session_id

    def get_session(self, session_id: str) -> Optional[Dict[str, Any]]:
        """Get session data"""
        return self._sessions.get(session_id)

    def _require_session(self, session_id: str) -> Dict[str, Any]:
        session = self.get_session(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    def get_list_view(self, session_id: str) -> ProductListView:
        """Return the session's list view, creating it on first visit to the list route."""
        session = self._require_session(session_id)
        if session["list_view"] is None:
            session["list_view"] = ProductListView(self.client, sort_by=self.default_sort)
        return session["list_view"]

    def get_detail_view(self, session_id: str, product_id: int) -> ProductDetailView:
        session = self._require_session(session_id)
        views = session["detail_views"]
        if product_id not in views:
            views[product_id] = ProductDetailView(self.client, product_id)
        return views[product_id]

    def close_detail_view(self, session_id: str, product_id: int) -> bool:
        """Leave a detail route; the next visit starts a fresh activation."""
        session = self._require_session(session_id)
        view = session["detail_views"].pop(product_id, None)
        if view is None:
            return False
        view.deactivate()
        return True

    def end_session(self, session_id: str) -> bool:
        """End session and deactivate its views so late fetch results are dropped"""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        if session["list_view"] is not None:
            session["list_view"].deactivate()
        for view in session["detail_views"].values():
            view.deactivate()
        return True
