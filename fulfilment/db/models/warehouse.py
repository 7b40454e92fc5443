from sqlalchemy import Column, Integer, String

from fulfilment.db.base import Base
from fulfilment.db.types import UTCDateTime


class Warehouse(Base):
    __tablename__ = "warehouses"

    id = Column(Integer, primary_key=True, index=True)
    business_unit_code = Column(String(64), unique=True, nullable=False, index=True)
    location = Column(String(64), nullable=False, index=True)
    capacity = Column(Integer, nullable=False)
    stock = Column(Integer, nullable=False)
    created_at = Column(UTCDateTime, nullable=False)
    archived_at = Column(UTCDateTime, nullable=True)
