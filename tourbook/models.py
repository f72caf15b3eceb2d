from sqlalchemy import (
    String, Integer, Float, ForeignKey, DateTime, Boolean, Text, CheckConstraint, Index
)
from sqlalchemy.orm import mapped_column, relationship, DeclarativeBase


class Base(DeclarativeBase): ...


# ---------- Catalog ----------
class Tour(Base):
    __tablename__ = "tours"
    id            = mapped_column(String(64), primary_key=True)
    title         = mapped_column(String(200), nullable=False)
    description   = mapped_column(Text, nullable=True)
    price         = mapped_column(Integer, nullable=False, default=0)  # whole currency units
    duration_days = mapped_column(Float, nullable=True)  # 0.5 = half-day tour
    available     = mapped_column(Boolean, nullable=False, default=True)

    bookings      = relationship("Booking", back_populates="tour", lazy="raise")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_tours_price_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<Tour {self.id} {self.title!r}>"


# ---------- Bookings ----------
class Booking(Base):
    __tablename__ = "bookings"
    id             = mapped_column(String(64), primary_key=True)
    tour_id        = mapped_column(ForeignKey("tours.id"), nullable=False)
    customer_name  = mapped_column(String(200), nullable=False)
    customer_email = mapped_column(String(320), nullable=False)
    seats          = mapped_column(Integer, nullable=False)
    # Set by BookingService, never by the database
    created_at     = mapped_column(DateTime(timezone=True), nullable=False)

    tour           = relationship("Tour", back_populates="bookings", lazy="raise")

    __table_args__ = (
        CheckConstraint("seats > 0", name="ck_bookings_seats_positive"),
        Index("ix_bookings_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Booking {self.id} tour={self.tour_id} seats={self.seats}>"
