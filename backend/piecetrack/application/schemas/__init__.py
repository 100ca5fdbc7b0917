from .user import UserCreate, UserUpdate, UserResponse
from .status import StatusCreate, StatusResponse
from .piece import ImagePreviewResponse, PiecePageResponse, PieceResponse, PieceSave
from .report import ReportPageSchema, ReportQuery, ReportRowSchema

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "StatusCreate",
    "StatusResponse",
    "ImagePreviewResponse",
    "PiecePageResponse",
    "PieceResponse",
    "PieceSave",
    "ReportPageSchema",
    "ReportQuery",
    "ReportRowSchema",
]
