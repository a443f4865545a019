from .load_items import ContentEntityDatasource

__all__ = ["ContentEntityDatasource"]
