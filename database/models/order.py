import uuid

from sqlalchemy import Column, Text, Numeric, TIMESTAMP, ForeignKey, func, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship

from .base import Base


class OrderRow(Base):
    """
    Translation order placed by a customer.

    status: pending|assigned|in_progress|completed|cancelled
    Only completed orders are used as collaborative evidence.
    """
    __tablename__ = 'orders'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    customer_id = Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    title = Column(Text)
    source_language = Column(Text, nullable=False)
    target_language = Column(Text, nullable=False)
    tags = Column(JSONB, nullable=False, default=list)
    document_url = Column(Text)

    status = Column(Text, nullable=False, default='pending')

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=func.now())

    customer = relationship("User", back_populates="orders")
    assignments = relationship("OrderAssignmentRow", back_populates="order", cascade="all, delete-orphan")
    analysis = relationship("OrderAnalysisRow", back_populates="order", uselist=False, cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_orders_customer', 'customer_id'),
        Index('idx_orders_language_pair_status', 'source_language', 'target_language', 'status'),
    )


class OrderAssignmentRow(Base):
    """
    Link between an order and the translator working on it.

    translator_id is nullable in historical data; such rows are skipped
    when counting completions, as are rows still in the requested status.
    """
    __tablename__ = 'order_assignments'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    order_id = Column(UUID(as_uuid=True), ForeignKey('orders.id', ondelete='CASCADE'), nullable=False)
    translator_id = Column(UUID(as_uuid=True), ForeignKey('translator_profiles.id', ondelete='SET NULL'), nullable=True)
    customer_id = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=True)
    # NULL once accepted; 'requested' while awaiting the translator
    status = Column(Text, nullable=True)

    assigned_at = Column(TIMESTAMP(timezone=True), server_default=sql_text("timezone('UTC', now())"))

    order = relationship("OrderRow", back_populates="assignments")
    translator = relationship("TranslatorProfileRow", back_populates="assignments")

    __table_args__ = (
        Index('idx_order_assignments_order', 'order_id'),
        Index('idx_order_assignments_translator', 'translator_id'),
    )


class OrderAnalysisRow(Base):
    """Output of document analysis for an order (produced elsewhere)."""
    __tablename__ = 'order_analysis'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    order_id = Column(UUID(as_uuid=True), ForeignKey('orders.id', ondelete='CASCADE'), nullable=False, unique=True)

    word_count = Column(Numeric)
    complexity_score = Column(Numeric(4, 3))  # 0-1
    classification = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    order = relationship("OrderRow", back_populates="analysis")
