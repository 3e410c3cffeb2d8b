from database.repositories.base import BaseRepository
from database.repositories.translator import TranslatorRepository
from database.repositories.order import OrderRepository

__all__ = [
    'BaseRepository',
    'TranslatorRepository',
    'OrderRepository',
]
