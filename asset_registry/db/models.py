"""SQLAlchemy ORM models."""
from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from asset_registry.infrastructure.database.base import Base


class Asset(Base):
    __tablename__ = "assets"

    id = Column(Integer, primary_key=True, autoincrement=False)
    display_name = Column(String(64), nullable=False)
    owner = Column(String(255), nullable=False, index=True)
    size_bytes = Column(Integer, nullable=False)
    registered_at_height = Column(Integer, nullable=False)
    description = Column(String(128), nullable=False)
    category_tags = Column(Text, nullable=False)  # JSON encoded list
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class AssetPermission(Base):
    __tablename__ = "asset_permissions"

    # No foreign key to assets: entries outlive the asset they refer to.
    asset_id = Column(Integer, primary_key=True, autoincrement=False)
    identity = Column(String(255), primary_key=True)
    granted = Column(Boolean, nullable=False, default=False)


class RegistryStateRow(Base):
    __tablename__ = "registry_state"

    id = Column(Integer, primary_key=True, autoincrement=False, default=1)
    total_registered = Column(Integer, nullable=False, default=0)
    ledger_height = Column(Integer, nullable=False, default=0)
    admin_identity = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
