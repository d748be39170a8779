from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from docdrop.models.base import Base, UUIDMixin


class Upload(UUIDMixin, Base):
    __tablename__ = "uploads"

    # Client-supplied name, stored verbatim.
    filename: Mapped[str] = mapped_column(String(1024), nullable=False)
    storage_url: Mapped[str] = mapped_column(Text, nullable=False)
    uploaded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
