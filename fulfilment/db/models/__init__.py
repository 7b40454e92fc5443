from fulfilment.db.models.warehouse import Warehouse

__all__ = ["Warehouse"]
