from docdrop.models.base import Base
from docdrop.models.upload import Upload

__all__ = ["Base", "Upload"]
