import logging
from typing import List
from sqlalchemy import select

from database.models import TranslatorProfileRow
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class TranslatorRepository(BaseRepository):
    def find_by_language_pair(
        self,
        source_language: str,
        target_language: str
    ) -> List[TranslatorProfileRow]:
        # JSONB containment: languages @> '["src", "tgt"]'
        stmt = select(TranslatorProfileRow).where(
            TranslatorProfileRow.languages.contains([source_language, target_language])
        ).order_by(TranslatorProfileRow.id)
        return self.db.execute(stmt).scalars().all()
