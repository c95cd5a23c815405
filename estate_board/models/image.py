from sqlalchemy import Column, Integer, String, ForeignKey, LargeBinary
from sqlalchemy.orm import relationship, deferred
from estate_board.database import Base


class Image(Base):
    """
    Фотография объявления, хранится в базе целиком
    """
    __tablename__ = "images"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    listing_id = Column(Integer, ForeignKey("listings.id", ondelete="CASCADE"), nullable=False, index=True)
    mime = Column(String(255), nullable=False)

    # Байты грузятся только при явном обращении, чтобы списки объявлений не тянули фото
    data = deferred(Column(LargeBinary, nullable=False))

    listing = relationship("Listing", back_populates="images")

    def __repr__(self):
        return f"<Image(id={self.id}, listing_id={self.listing_id}, mime={self.mime})>"
