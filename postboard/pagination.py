from flask import current_app, request


# Largest row offset handed to the database; fits a signed 32-bit integer.
MAX_OFFSET = 2**31 - 1


def _int_arg(name: str, default: int) -> int:
    # Non-numeric values fall back to the default.
    return request.args.get(name, default=default, type=int)


def pagination_args():
    """Read ``page``/``limit`` from the query string, clamped to sane bounds."""
    default_limit = current_app.config.get("DEFAULT_PAGE_LIMIT", 10)
    max_limit = current_app.config.get("MAX_PAGE_LIMIT", 50)

    limit = min(max(_int_arg("limit", default_limit), 1), max_limit)
    max_page = MAX_OFFSET // limit + 1
    page = min(max(_int_arg("page", 1), 1), max_page)
    return page, limit


def offset_for(page: int, limit: int) -> int:
    return (page - 1) * limit
