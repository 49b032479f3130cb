"""
services/errors.py
------------------
Errors raised by the service layer.
"""


class NotFoundError(Exception):
    """The requested entity does not exist (or no longer exists)."""

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id
