"""Tabellen-Definitionen (SQLAlchemy Core) für Spend-Ledger, Uploads und Logs"""

from sqlalchemy import (
    Boolean, Column, Date, DateTime, Float, ForeignKey, Integer, MetaData,
    Numeric, String, Table, Text, func,
)

from ..config import TABLE_SPEND, TABLE_UPLOADS, TABLE_LOGS

metadata = MetaData()

uploads_table = Table(
    TABLE_UPLOADS,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", String(255), nullable=False, index=True),
    Column("filename", String(512), nullable=False),
    Column("file_url", String(1024), nullable=True),
    Column("file_size", Integer, nullable=False, default=0),
    Column("parsed_data", Text, nullable=True),
    Column("processing_status", String(20), nullable=False, default="completed"),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
)

spend_table = Table(
    TABLE_SPEND,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", String(255), nullable=False, index=True),
    Column("upload_id", Integer, ForeignKey(f"{TABLE_UPLOADS}.id"), nullable=True, index=True),
    Column("campaign_name", String(512), nullable=False),
    Column("spend_amount", Numeric(14, 2), nullable=False),
    Column("currency", String(3), nullable=False, default="USD"),
    Column("date", Date, nullable=False, index=True),
    Column("is_verified", Boolean, nullable=False, default=False),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
)

logs_table = Table(
    TABLE_LOGS,
    metadata,
    Column("log_id", Integer, primary_key=True, autoincrement=True),
    Column("job_id", String(255), nullable=False, index=True),
    Column("job_type", String(100), nullable=False),
    Column("level", String(20), nullable=False, index=True),
    Column("message", Text, nullable=False),
    Column("timestamp", DateTime, nullable=False, server_default=func.now(), index=True),
    Column("duration_seconds", Float, nullable=True),
    Column("status", String(20), nullable=True),
    Column("error_text", Text, nullable=True),
)
