from sqlalchemy import Column, String
from judging.core.database import Base

class Judge(Base):
    __tablename__ = "judges"

    # Chosen by the admin who creates the judge
    id = Column(String(64), primary_key=True, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
