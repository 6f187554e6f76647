"""
Tagged result union for clients that report failures as values.

    result = client.upload_from_url(url)
    if isinstance(result, Ok):
        use(result.data)
    else:
        log(result.error, result.status)
"""
from typing import Any, Generic, Literal, Optional, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class Ok(BaseModel, Generic[T]):
    success: Literal[True] = True
    data: T


class Err(BaseModel):
    success: Literal[False] = False
    error: str
    status: Optional[int] = None


Result = Union[Ok[Any], Err]
