from httpx import QueryParams


def with_query(path: str, **params) -> str:
    """Append the positive integer params to path as a query string"""
    params = {k: v for k, v in params.items() if v and v > 0}
    if not params:
        return path
    return f"{path}?{QueryParams(params)}"
