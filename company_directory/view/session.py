"""
Client session for the company directory.

``DirectorySession`` is what a user interface talks to.  It keeps the
cached record list, the current ``ViewState``, the state of the
create/edit form and whatever error the user should currently see.
Every server call is made through the injected ``api`` object (a
``CompanyDirectoryAPI`` in production) and every failure is caught
here and turned into session state:

* validation failures stay on the form, which remains open with the
  submitted values so they can be corrected;
* a vanished record becomes a dismissible ``notice`` and is dropped
  from the cache;
* transport failures set ``error``; ``retry()`` fetches the full list
  again;
* a data consistency fault (a created id that is already cached) is
  logged and kept in ``fault``.

The cache is only patched after the server confirmed the change.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from company_directory.app.core.config import settings
from company_directory.errors import (
    DataConsistencyError,
    NotFoundFailure,
    RecordNotFoundError,
    TransportFailure,
    ValidationFailure,
)

from .engine import ViewResult, compute_view
from .reconciler import apply_create, apply_delete, apply_update
from .state import Pagination, ViewState

logger = logging.getLogger(__name__)

CREATE = "create"
EDIT = "edit"

LOAD_ERROR = "Failed to load company data."


@dataclass
class FormState:
    """The create/edit form.

    ``mode`` is ``"create"`` or ``"edit"``; ``record_id`` is set when
    editing.  ``error`` and ``details`` hold the last validation
    failure.
    """

    mode: str = CREATE
    record_id: Optional[str] = None
    values: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None
    details: Any = None
    submitting: bool = False


class DirectorySession:
    def __init__(self, api, page_size: Optional[int] = None) -> None:
        self.api = api
        page_size = page_size or settings.page_size
        self.records: List[Dict[str, Any]] = []
        self.state = ViewState(pagination=Pagination(page_size=page_size))
        self.form: Optional[FormState] = None
        self.loading = False
        self.error: Optional[str] = None
        self.notice: Optional[str] = None
        self.fault: Optional[str] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def refresh(self) -> bool:
        """Replace the cache with the server's full list.

        On failure the previous cache is kept and ``error`` is set.
        """
        self.loading = True
        self.error = None
        try:
            records = self.api.list_companies()
        except (TransportFailure, NotFoundFailure) as exc:
            logger.error("Loading companies failed: %s", exc)
            self.error = LOAD_ERROR
            return False
        finally:
            self.loading = False
        self.records = list(records)
        self._clamp_page()
        logger.info("Loaded %s companies", len(self.records))
        return True

    def retry(self) -> bool:
        return self.refresh()

    # ------------------------------------------------------------------
    # View state
    # ------------------------------------------------------------------
    def view(self) -> ViewResult:
        return compute_view(self.records, self.state.filters, self.state.sort, self.state.pagination)

    def set_filter(self, name: str, value: str) -> None:
        self.state = self.state.with_filter(name, value)

    def set_sort(self, sort_field: str, direction: str) -> None:
        self.state = self.state.with_sort(sort_field, direction)

    def toggle_sort(self, sort_field: str) -> None:
        self.state = self.state.with_sort_toggle(sort_field)

    def go_to_page(self, page: int) -> None:
        self.state = self.state.with_page(page, self.view().total_pages)

    def next_page(self) -> None:
        self.go_to_page(self.state.pagination.current_page + 1)

    def previous_page(self) -> None:
        self.go_to_page(self.state.pagination.current_page - 1)

    def _clamp_page(self) -> None:
        # The cache shrank; stay on a page that still has records.
        self.go_to_page(self.state.pagination.current_page)

    def dismiss_notice(self) -> None:
        self.notice = None

    # ------------------------------------------------------------------
    # Form
    # ------------------------------------------------------------------
    def open_create_form(self, values: Optional[Dict[str, Any]] = None) -> FormState:
        self.form = FormState(mode=CREATE, values=dict(values or {}))
        return self.form

    def open_edit_form(self, record_id: str) -> FormState:
        for record in self.records:
            if record.get("id") == record_id:
                values = {k: v for k, v in record.items() if k not in ("id", "createdAt", "updatedAt")}
                self.form = FormState(mode=EDIT, record_id=record_id, values=values)
                return self.form
        raise KeyError(record_id)

    def close_form(self) -> None:
        self.form = None

    def submit_form(self, values: Optional[Dict[str, Any]] = None) -> bool:
        """Send the form to the server.

        The form is closed only when the server confirmed the change.
        Returns ``True`` on success.
        """
        if self.form is None:
            raise RuntimeError("No form is open")
        form = replace(self.form, error=None, details=None, submitting=True)
        if values is not None:
            form.values = dict(values)
        self.form = form
        try:
            if form.mode == CREATE:
                ok = self.create(form.values)
            else:
                ok = self.update(form.record_id, form.values)
        finally:
            form.submitting = False
        if ok:
            self.form = None
        return ok

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(self, payload: Dict[str, Any]) -> bool:
        self.error = None
        try:
            record = self.api.create_company(payload)
        except ValidationFailure as exc:
            self._validation_failed("create", exc)
            return False
        except (TransportFailure, NotFoundFailure) as exc:
            # A 404 on the collection itself means the API URL is wrong.
            logger.error("Creating company failed: %s", exc)
            self.error = f"Could not create company: {exc}"
            return False
        try:
            self.records = apply_create(self.records, record)
        except DataConsistencyError as exc:
            logger.error("Data consistency fault after create: %s", exc)
            self.fault = str(exc)
            # The server did store the record; resubmitting would duplicate it.
            self.form = None
            return False
        logger.info("Created company %s", record.get("id"))
        return True

    def update(self, record_id: str, payload: Dict[str, Any]) -> bool:
        self.error = None
        try:
            record = self.api.update_company(record_id, payload)
        except ValidationFailure as exc:
            self._validation_failed("update", exc)
            return False
        except NotFoundFailure as exc:
            self._vanished(record_id, exc)
            return False
        except TransportFailure as exc:
            logger.error("Updating company %s failed: %s", record_id, exc)
            self.error = f"Could not update company: {exc}"
            return False
        try:
            self.records = apply_update(self.records, record)
        except RecordNotFoundError as exc:
            logger.warning("%s", exc)
            self.notice = "The company was updated but is no longer in the list; refresh to see it."
            return True
        return True

    def delete(self, record_id: str) -> bool:
        self.error = None
        try:
            self.api.delete_company(record_id)
        except NotFoundFailure as exc:
            self._vanished(record_id, exc)
            return False
        except TransportFailure as exc:
            logger.error("Deleting company %s failed: %s", record_id, exc)
            self.error = f"Could not delete company: {exc}"
            return False
        self.records = apply_delete(self.records, record_id)
        self._clamp_page()
        logger.info("Deleted company %s", record_id)
        return True

    def _validation_failed(self, action: str, exc: ValidationFailure) -> None:
        logger.warning("Server rejected %s: %s", action, exc.message)
        if self.form is not None:
            self.form.error = exc.message
            self.form.details = exc.details
        else:
            self.error = exc.message

    def _vanished(self, record_id: str, exc: NotFoundFailure) -> None:
        logger.warning("Company %s no longer exists: %s", record_id, exc)
        self.notice = "This company no longer exists."
        self.records = apply_delete(self.records, record_id)
        self._clamp_page()
        if self.form is not None and self.form.record_id == record_id:
            self.form = None
