from .document_store import SQLAlchemyRecordStore

__all__ = [
    "SQLAlchemyRecordStore",
]
