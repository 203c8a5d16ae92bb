"""SQLAlchemy model for websites."""

from sqlalchemy import Column, DateTime, Integer, String, Text, UniqueConstraint

from app.infrastructure.database import Base


class WebsiteModel(Base):
    """Database representation of a managed website."""

    __tablename__ = "website"
    __table_args__ = (
        UniqueConstraint("subdomain", name="uq_website_subdomain"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    subdomain = Column(String(63), nullable=False, index=True)
    domain = Column(String(255), nullable=True)
    template_id = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False, default="BUILDING")
    owner = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    visitor_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(), nullable=False)
    updated_at = Column(DateTime(), nullable=False)


__all__ = ["WebsiteModel"]
