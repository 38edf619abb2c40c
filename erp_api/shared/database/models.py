from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, Numeric, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from erp_api.config.database import Base

# ===== USERS & CLIENTS =====

class User(Base):
    """System user with a role claim (admin / operator)"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(50), default='operator', nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

class Client(Base):
    """Customer that sales are billed to"""
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    phone = Column(String(50), nullable=False)
    address = Column(String(255), nullable=False)

    # Relationships
    sales = relationship("Sale", back_populates="client")

# ===== PRODUCTS =====

class Product(Base):
    """Sellable product; stock is the contended resource"""
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint('stock >= 0', name='products_stock_non_negative'),
        CheckConstraint('price >= 0', name='products_price_non_negative'),
    )

    # Relationships
    sale_items = relationship("SaleItem", back_populates="product")

# ===== SALES =====

class Sale(Base):
    """Committed sale; owns its items"""
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    total = Column(Numeric(10, 2), nullable=False)
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    client = relationship("Client", back_populates="sales")
    items = relationship(
        "SaleItem",
        back_populates="sale",
        cascade="all, delete-orphan",
        order_by="SaleItem.id"
    )

class SaleItem(Base):
    """Line of a sale; price is the snapshot taken at sale time"""
    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True, index=True)
    sale_id = Column(Integer, ForeignKey("sales.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    __table_args__ = (
        CheckConstraint('quantity > 0', name='sale_items_quantity_positive'),
    )

    # Relationships
    sale = relationship("Sale", back_populates="items")
    product = relationship("Product", back_populates="sale_items")

    @property
    def subtotal(self):
        return self.quantity * self.price

# ===== LEDGER =====

class FinancialEntry(Base):
    """Immutable ledger entry (credit / debit)"""
    __tablename__ = "financial_entries"

    id = Column(Integer, primary_key=True, index=True)
    kind = Column(String(20), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(String(255), nullable=False)
    sale_id = Column(Integer, ForeignKey("sales.id"), unique=True, index=True)
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint("kind IN ('credit', 'debit')", name='financial_entries_kind'),
        CheckConstraint('amount >= 0', name='financial_entries_amount_non_negative'),
    )
