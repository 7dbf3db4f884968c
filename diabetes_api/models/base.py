"""
Shared model helpers
"""

from datetime import date, datetime


class SerializerMixin:
    """Column-by-column JSON rendering of a model row."""

    # Columns a client may write on create/update
    writable_fields = ()

    def to_dict(self):
        data = {}
        for column in self.__table__.columns:
            value = getattr(self, column.name)
            if isinstance(value, (datetime, date)):
                value = value.isoformat()
            data[column.name] = value
        return data

    def apply(self, payload):
        """Copy the writable fields present in ``payload`` onto the row."""
        for name in self.writable_fields:
            if name in payload:
                setattr(self, name, payload[name])
        return self
