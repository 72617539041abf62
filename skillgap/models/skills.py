from sqlalchemy import Column, Integer, String, Text
from skillgap.database import Base


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, index=True, nullable=False)
    category = Column(String(64), nullable=True)
    subcategory = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    demand_score = Column(Integer, nullable=True)
