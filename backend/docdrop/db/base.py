from docdrop.models import Base

__all__ = ["Base"]
