from typing import Optional, TypeVar

from fastapi import HTTPException, status

T = TypeVar("T")


def require_param(name: str, value: Optional[T]) -> T:
    """Return ``value`` or fail with 400 naming the missing query parameter."""
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{name} query parameter is required",
        )
    return value


def require_one_of(**params: Optional[int]) -> str:
    """
    Name of the single query parameter that was supplied.

    Fails with 400 when none or more than one of ``params`` is present.
    """
    supplied = [name for name, value in params.items() if value is not None]
    if len(supplied) == 1:
        return supplied[0]
    names = " or ".join(params)
    if not supplied:
        detail = f"Either {names} query parameter is required"
    else:
        detail = f"Provide only one of {names}, not both"
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
