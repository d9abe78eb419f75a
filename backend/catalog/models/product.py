"""
Products table
"""
import uuid

from sqlalchemy import Column, Integer, String, DateTime, DECIMAL, CheckConstraint, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from catalog.core.database import Base


class ProductModel(Base):
    """
    Tabla de productos del catálogo

    Name is unique; the repository also checks it before inserting.
    """
    __tablename__ = "products"

    id = Column(UUID(as_uuid=False), primary_key=True, default=lambda: str(uuid.uuid4()))

    name = Column(String(255), nullable=False, unique=True)
    price = Column(DECIMAL(10, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint("price > 0", name="products_price_positive"),
        CheckConstraint("stock >= 0", name="products_stock_non_negative"),
        CheckConstraint("char_length(name) >= 1", name="products_name_not_empty"),
        Index("products_price_idx", "price"),
        Index("products_stock_idx", "stock"),
    )
