from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, Text, func
from sqlalchemy.orm import relationship
from skillgap.database import Base


class ResumeRecord(Base):
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    file_name = Column(String(255), nullable=False)
    uploaded_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    text_content = Column(Text, nullable=False)
    ai_analysis = Column(JSON, nullable=False, default=dict)
    detected_skills = Column(JSON, nullable=False, default=list)

    user = relationship("User", backref="resume_record")
