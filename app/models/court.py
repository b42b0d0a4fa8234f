from sqlalchemy import Column, Integer, String, Boolean, DateTime, Float
from sqlalchemy.orm import relationship
from app.database import Base
from datetime import datetime


class Court(Base):
    __tablename__ = "courts"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    location = Column(String, nullable=True)
    surface_type = Column(String, nullable=True)  # e.g., hard, clay, artificial_grass
    is_indoor = Column(Boolean, default=False)
    has_lighting = Column(Boolean, default=False)
    price_per_hour = Column(Float, nullable=True)
    image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    matches = relationship("app.models.match.Match", back_populates="court")
