"""
Business logic for company records.

``CompanyService`` is the record store of the directory.  It assigns
opaque identifiers and timestamps, fills defaults for omitted fields
(through the ``CompanyCreate`` schema) and raises ``ValueError`` when
an update or delete targets an unknown identifier.  Listing returns
the full collection; filtering, sorting and paging are left to the
client.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List

from company_directory.app.core.db import get_connection
from company_directory.app.schemas.company import CompanyCreate, CompanyRead

logger = logging.getLogger(__name__)

# Columns a client may change; id and timestamps are store-maintained.
_UPDATABLE_COLUMNS = {"name", "ceo", "industry", "location", "employees", "founded", "logo_icon"}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class CompanyService:
    """Service for managing company records stored in SQLite."""

    @classmethod
    async def list_companies(cls) -> List[CompanyRead]:
        """Return every company, newest first."""
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT * FROM companies ORDER BY created_at DESC, rowid DESC"
            ).fetchall()
            logger.info("Served %s companies", len(rows))
            return [cls._row_to_company(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def get_company(cls, company_id: str) -> CompanyRead:
        """Retrieve a single company by ID.

        Raises ``ValueError`` if the company does not exist.
        """
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT * FROM companies WHERE id = ?", (company_id,)
            ).fetchone()
            if not row:
                raise ValueError(f"Company {company_id} not found")
            return cls._row_to_company(row)
        finally:
            conn.close()

    @classmethod
    async def create_company(cls, data: CompanyCreate) -> CompanyRead:
        """Insert a new company and return it with its generated ID."""
        company_id = uuid.uuid4().hex
        timestamp = _now()
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO companies (id, name, ceo, industry, location, employees, founded, logo_icon,
                                       created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    company_id,
                    data.name,
                    data.ceo,
                    data.industry,
                    data.location,
                    data.employees,
                    data.founded,
                    data.logo_icon,
                    timestamp,
                    timestamp,
                ),
            )
            conn.commit()
            logger.info("Created company %s (%s)", data.name, company_id)
            row = cursor.execute(
                "SELECT * FROM companies WHERE id = ?", (company_id,)
            ).fetchone()
            return cls._row_to_company(row)
        finally:
            conn.close()

    @classmethod
    async def update_company(cls, company_id: str, updates: dict) -> CompanyRead:
        """Update fields of an existing company.

        Only keys present in ``updates`` are written; ``updated_at`` is
        always refreshed.  Raises ``ValueError`` if the company does
        not exist.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            row = cursor.execute(
                "SELECT id FROM companies WHERE id = ?", (company_id,)
            ).fetchone()
            if not row:
                raise ValueError(f"Company {company_id} not found")
            fields = []
            values = []
            for key, value in updates.items():
                if key not in _UPDATABLE_COLUMNS:
                    continue
                fields.append(f"{key} = ?")
                values.append(value)
            fields.append("updated_at = ?")
            values.append(_now())
            values.append(company_id)
            cursor.execute(
                f"UPDATE companies SET {', '.join(fields)} WHERE id = ?", tuple(values)
            )
            conn.commit()
            updated = cursor.execute(
                "SELECT * FROM companies WHERE id = ?", (company_id,)
            ).fetchone()
            logger.info("Updated company %s (%s)", updated["name"], company_id)
            return cls._row_to_company(updated)
        finally:
            conn.close()

    @classmethod
    async def delete_company(cls, company_id: str) -> None:
        """Delete a company.

        Raises ``ValueError`` if the company does not exist.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM companies WHERE id = ?", (company_id,))
            if cursor.rowcount == 0:
                raise ValueError(f"Company {company_id} not found")
            conn.commit()
            logger.info("Deleted company with ID %s", company_id)
        finally:
            conn.close()

    @staticmethod
    def _row_to_company(row) -> CompanyRead:
        return CompanyRead(
            id=row["id"],
            name=row["name"],
            ceo=row["ceo"],
            industry=row["industry"],
            location=row["location"],
            employees=row["employees"],
            founded=row["founded"],
            logo_icon=row["logo_icon"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
