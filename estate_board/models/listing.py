from sqlalchemy import Column, Integer, String, Float, DateTime, Text, Boolean, BigInteger
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from estate_board.database import Base


class Listing(Base):
    """
    Объявление о продаже/аренде недвижимости
    """
    __tablename__ = "listings"
    # AUTOINCREMENT в SQLite: id удалённых объявлений не выдаются повторно
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(100), nullable=False)

    price = Column(BigInteger, nullable=False)

    city = Column(String(255), nullable=False, index=True)
    district = Column(String(255), nullable=True)
    street = Column(String(255), nullable=True)

    rooms = Column(Integer, nullable=True)
    area = Column(Float, nullable=True)
    floor = Column(Integer, nullable=True)

    balcony = Column(Boolean, nullable=False, default=False)
    terrace = Column(Boolean, nullable=False, default=False)
    garden = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    images = relationship(
        "Image",
        back_populates="listing",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Image.id",
    )

    @property
    def image_ids(self):
        return [image.id for image in self.images]

    def __repr__(self):
        return f"<Listing(id={self.id}, city={self.city}, title={self.title[:50] if self.title else None})>"
