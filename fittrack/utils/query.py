from fittrack.utils.errors import NotFoundError


def get_owned(model, id, user_id, message="Not found"):
    """Fetch a row by id only if it belongs to ``user_id``.

    Missing rows and rows owned by someone else both raise ``NotFoundError``
    so callers cannot probe for other users' ids.
    """
    obj = model.query.filter_by(id=id, user_id=user_id).first()
    if obj is None:
        raise NotFoundError(message)
    return obj
