from .base import Base
from .user import User
from .translator import TranslatorProfileRow
from .order import OrderRow, OrderAssignmentRow, OrderAnalysisRow

__all__ = [
    'Base',
    'User',
    'TranslatorProfileRow',
    'OrderRow',
    'OrderAssignmentRow',
    'OrderAnalysisRow',
]
