"""SQLAlchemy ORM model for keyed JSON documents."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from piecetrack.infrastructure.database.base import Base


class DocumentModel(Base):
    """ORM model — maps to the 'documents' table.

    One row per document; ``collection`` + ``key`` identify it and ``data``
    holds the document fields.
    """

    __tablename__ = "documents"

    collection: Mapped[str] = mapped_column(String(50), primary_key=True)
    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_documents_collection", "collection"),
    )

    def __repr__(self) -> str:
        return f"<DocumentModel(collection='{self.collection}', key='{self.key}')>"
