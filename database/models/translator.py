from sqlalchemy import Column, Text, Boolean, Integer, Numeric, TIMESTAMP, ForeignKey, func, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship

from .base import Base


class TranslatorProfileRow(Base):
    """
    Translator profile, keyed by the owning user's id.

    languages / expertise / custom_tags are JSONB string arrays so the
    catalog query can use containment (@>) on the language pair.
    """
    __tablename__ = 'translator_profiles'

    id = Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    full_name = Column(Text)

    languages = Column(JSONB, nullable=False, default=list)
    expertise = Column(JSONB, nullable=False, default=list)
    custom_tags = Column(JSONB, default=list)

    rating = Column(Numeric(5, 2), nullable=False, default=0)  # 0-100
    availability = Column(Boolean, default=True)

    total_orders = Column(Integer, default=0)
    completed_orders = Column(Integer, default=0)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=func.now())

    user = relationship("User", back_populates="translator_profile")
    assignments = relationship("OrderAssignmentRow", back_populates="translator")

    __table_args__ = (
        Index('idx_translator_profiles_languages', 'languages', postgresql_using='gin'),
        Index('idx_translator_profiles_availability', 'availability'),
    )
