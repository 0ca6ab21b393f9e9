from marshmallow import Schema, EXCLUDE, fields


class BaseSchema(Schema):
    class Meta:
        unknown = EXCLUDE


class Day(fields.Date):
    """Calendar day; a full ISO timestamp is accepted and truncated to its date."""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, str) and len(value) > 10:
            value = value[:10]
        return super()._deserialize(value, attr, data, **kwargs)
