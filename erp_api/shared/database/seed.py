import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from erp_api.config.database import Base, begin_write
from erp_api.config.settings import settings
from erp_api.core.auth.security import hash_password
from erp_api.shared.database.models import Client, Product, User

logger = logging.getLogger(__name__)


def init_db(engine) -> None:
    """Create tables that do not exist yet"""
    Base.metadata.create_all(bind=engine)


def seed_initial_data(db: Session) -> bool:
    """
    Create the default admin, and demo records when enabled.

    Only runs against an empty users table; returns True when data was added.
    """
    begin_write(db)
    if db.query(User).first() is not None:
        return False

    db.add(User(
        name="Administrator",
        email=settings.admin_email.lower(),
        password_hash=hash_password(settings.admin_password),
        role="admin"
    ))

    if settings.seed_demo_data:
        db.add(Client(
            name="Example Client",
            email="client@example.com",
            phone="(11) 99999-9999",
            address="123 Example Street"
        ))
        db.add_all([
            Product(name="Product A", description="Description of product A", price=Decimal("99.90"), stock=50),
            Product(name="Product B", description="Description of product B", price=Decimal("149.90"), stock=30),
        ])

    db.commit()
    logger.info(f"👤 Admin user created: {settings.admin_email}")
    return True
