from __future__ import annotations

from dataclasses import asdict
from typing import Any

from psycopg import sql
from psycopg.rows import dict_row

from mediacapture.database.connection import get_connection
from mediacapture.database.repositories.base import BaseUploadRepository
from mediacapture.uploads.models import NewUpload, UploadRecord

_COLUMNS = (
    "id, kind, original_name, storage_path, mime_type, size_bytes, processed, "
    "analysis_text, transcription_text, exported, exported_url, created_at"
)


def _row_to_record(row: dict[str, Any]) -> UploadRecord:
    return UploadRecord(
        id=row["id"],
        kind=row["kind"],
        original_name=row["original_name"],
        storage_path=row["storage_path"],
        mime_type=row["mime_type"],
        size_bytes=row["size_bytes"],
        created_at=row["created_at"],
        processed=row["processed"],
        analysis_text=row["analysis_text"],
        transcription_text=row["transcription_text"],
        exported=row["exported"],
        exported_url=row["exported_url"],
    )


class PostgresUploadRepository(BaseUploadRepository):
    """Database operations for the uploads table."""

    def create_schema(self) -> None:
        """Create the uploads table if it does not exist yet."""
        with get_connection() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS uploads (
                    id BIGSERIAL PRIMARY KEY,
                    kind TEXT NOT NULL,
                    original_name TEXT NOT NULL,
                    storage_path TEXT NOT NULL,
                    mime_type TEXT NOT NULL,
                    size_bytes BIGINT NOT NULL,
                    processed BOOLEAN NOT NULL DEFAULT FALSE,
                    analysis_text TEXT,
                    transcription_text TEXT,
                    exported BOOLEAN NOT NULL DEFAULT FALSE,
                    exported_url TEXT,
                    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                )
                """
            )
            conn.commit()

    def create(self, new_upload: NewUpload) -> UploadRecord:
        values = asdict(new_upload)
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    INSERT INTO uploads (
                        kind, original_name, storage_path, mime_type, size_bytes,
                        processed, analysis_text, transcription_text,
                        exported, exported_url
                    )
                    VALUES (
                        %(kind)s, %(original_name)s, %(storage_path)s,
                        %(mime_type)s, %(size_bytes)s, %(processed)s,
                        %(analysis_text)s, %(transcription_text)s,
                        %(exported)s, %(exported_url)s
                    )
                    RETURNING {_COLUMNS}
                    """,
                    values,
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT into uploads returned no row")
        return _row_to_record(row)

    def get(self, upload_id: int) -> UploadRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM uploads WHERE id = %s",
                    (upload_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return _row_to_record(row)

    def list(self) -> list[UploadRecord]:
        """Return all records ordered by created_at, newest first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM uploads ORDER BY created_at DESC, id DESC"
                )
                rows = cur.fetchall()
        return [_row_to_record(row) for row in rows]

    def update(self, upload_id: int, **fields: object) -> UploadRecord | None:
        self._check_update_fields(fields)
        if not fields:
            return self.get(upload_id)

        assignments = sql.SQL(", ").join(
            sql.SQL("{} = {}").format(sql.Identifier(name), sql.Placeholder(name))
            for name in fields
        )
        query = sql.SQL("UPDATE uploads SET {} WHERE id = {} RETURNING {}").format(
            assignments,
            sql.Placeholder("upload_id"),
            sql.SQL(_COLUMNS),
        )
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query, {**fields, "upload_id": upload_id})
                row = cur.fetchone()
            conn.commit()

        if row is None:
            return None
        return _row_to_record(row)

    def delete(self, upload_id: int) -> bool:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM uploads WHERE id = %s", (upload_id,))
                deleted = cur.rowcount > 0
            conn.commit()
        return deleted
