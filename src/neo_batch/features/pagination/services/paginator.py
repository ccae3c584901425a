"""In-memory pagination of sequences."""

from typing import Sequence, TypeVar

from ..entities import PaginationRequest, PaginationResponse

T = TypeVar("T")


def paginate(items: Sequence[T], request: PaginationRequest) -> PaginationResponse[T]:
    """Slice ``items`` into the page described by ``request``.

    A page past the end yields empty content with the real total.
    """
    content = list(items[request.offset:request.offset + request.limit])
    return PaginationResponse.create(content, request, total=len(items))
