from fulfilment.db.base import Base, SessionLocal, engine

__all__ = ["Base", "SessionLocal", "engine"]
