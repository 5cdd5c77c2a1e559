__all__ = ["ObjectStoreError"]


class ObjectStoreError(Exception):
    pass
