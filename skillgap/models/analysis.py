from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.sql import func

from skillgap.database import Base


class Analysis(Base):
    __tablename__ = "analyses"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    target_career_id = Column(Integer, ForeignKey("careers.id", ondelete="SET NULL"), nullable=True)
    target_career_name = Column(String(255), nullable=True)
    analysis_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Snapshot of the MatchBreakdown at analysis time.
    results = Column(JSON, nullable=False)
    ai_insights = Column(Text, nullable=True)
