"""SQLite store for company skill requirements and strategy payloads."""

from __future__ import annotations

import json
import logging
import sqlite3
import time
from pathlib import Path

from placement_prep.models.alignment import CompanyStrategy
from placement_prep.models.company import CompanyRecord
from placement_prep.models.skills import SkillRequirement

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".placement-prep" / "companies.db"


class CompanyStore:
    """Read/write access to company records.

    Lookups for unknown companies return None or empty collections rather
    than raising.
    """

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS companies (
                    company_id INTEGER PRIMARY KEY,
                    name TEXT NOT NULL,
                    record_json TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
            """)

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_path))

    def get(self, company_id: int) -> CompanyRecord | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT record_json FROM companies WHERE company_id = ?",
                (company_id,),
            ).fetchone()
        if row is None:
            return None
        return CompanyRecord.model_validate_json(row[0])

    def put(self, record: CompanyRecord) -> None:
        """Insert or replace a company record."""
        with self._connect() as conn:
            conn.execute(
                """INSERT OR REPLACE INTO companies
                   (company_id, name, record_json, updated_at)
                   VALUES (?, ?, ?, ?)""",
                (record.company_id, record.name, record.model_dump_json(), time.time()),
            )

    def delete(self, company_id: int) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM companies WHERE company_id = ?", (company_id,))

    def clear(self) -> int:
        """Delete all companies. Returns count of deleted rows."""
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM companies")
            return cursor.rowcount

    def list_companies(self) -> list[CompanyRecord]:
        """All records, ordered by name."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT record_json FROM companies ORDER BY name COLLATE NOCASE"
            ).fetchall()
        return [CompanyRecord.model_validate_json(r[0]) for r in rows]

    def get_skill_requirements(self, company_id: int) -> list[SkillRequirement]:
        record = self.get(company_id)
        return list(record.skills) if record else []

    def get_strategy(self, company_id: int) -> CompanyStrategy:
        record = self.get(company_id)
        return record.strategy if record else CompanyStrategy()

    def import_json(self, path: str | Path) -> int:
        """Load a JSON list of company records. Returns the number stored."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if isinstance(raw, dict):
            raw = raw.get("companies", [])
        records = [CompanyRecord.model_validate(item) for item in raw]
        for record in records:
            self.put(record)
        logger.info("Imported %d companies from %s", len(records), path)
        return len(records)

    def stats(self) -> dict:
        with self._connect() as conn:
            total = conn.execute("SELECT COUNT(*) FROM companies").fetchone()[0]
            last = conn.execute("SELECT MAX(updated_at) FROM companies").fetchone()[0]
        return {"total": total, "last_updated": last}
