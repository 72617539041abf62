from sqlalchemy import Boolean, Column, Float, Integer, String
from skillgap.database import Base


class LearningResource(Base):
    __tablename__ = "learning_resources"

    id = Column(Integer, primary_key=True, index=True)
    skill_name = Column(String(255), index=True, nullable=False)
    title = Column(String(512), nullable=False)
    provider = Column(String(64), nullable=True)
    url = Column(String(1024), nullable=False)
    type = Column(String(32), nullable=True)
    difficulty = Column(String(32), nullable=True)
    duration = Column(String(64), nullable=True)
    is_free = Column(Boolean, nullable=False, default=True)
    cost_amount = Column(Float, nullable=True)
    rating = Column(Float, nullable=True)
    review_count = Column(Integer, nullable=True)
