"""Bounded concurrent fan-out of chunked store lookups."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

from .exceptions import BatchChunkFailed, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T')

ChunkLookup = Callable[[List[str], Optional[Sequence[int]]], Awaitable[List[Any]]]


def chunked(ids: Sequence[T], chunk_size: int) -> List[List[T]]:
    """
    Partition ids into contiguous chunks.

    Args:
        ids: Ordered ids
        chunk_size: Maximum chunk length

    Returns:
        Chunks in input order; only the last may be shorter
    """
    if chunk_size <= 0:
        raise ValidationError("Chunk size must be positive")
    return [list(ids[i:i + chunk_size]) for i in range(0, len(ids), chunk_size)]


async def resolve_batch(
    lookup: ChunkLookup,
    ids: Sequence[str],
    chunk_size: int,
    concurrency_limit: int,
    type_filter: Optional[Sequence[int]] = None
) -> List[Any]:
    """
    Resolve ids chunk by chunk with bounded concurrency.

    At most ``concurrency_limit`` chunk lookups are in flight; each
    completion admits the next queued chunk. Results are flattened in
    chunk completion order, not input order.

    Args:
        lookup: Coroutine function taking a chunk of ids and the type filter
        ids: Ids to resolve
        chunk_size: Maximum ids per lookup
        concurrency_limit: Maximum lookups in flight
        type_filter: Object type tags passed through to every lookup

    Returns:
        Flattened lookup results

    Raises:
        ValidationError: If chunk size or concurrency limit is not positive
        BatchChunkFailed: If any chunk lookup fails
    """
    if concurrency_limit <= 0:
        raise ValidationError("Concurrency limit must be positive")

    chunks = chunked(ids, chunk_size)
    if not chunks:
        return []

    logger.debug(f"Resolving {len(ids)} ids in {len(chunks)} chunks, {concurrency_limit} at a time")

    results: List[Any] = []
    queued = iter(enumerate(chunks))
    in_flight: Dict[asyncio.Task, int] = {}

    def admit() -> None:
        while len(in_flight) < concurrency_limit:
            next_chunk = next(queued, None)
            if next_chunk is None:
                return
            index, chunk = next_chunk
            in_flight[asyncio.ensure_future(lookup(chunk, type_filter))] = index

    admit()
    try:
        while in_flight:
            done, _ = await asyncio.wait(in_flight.keys(), return_when=asyncio.FIRST_COMPLETED)
            failure: Optional[Tuple[int, BaseException]] = None
            # Read every finished task so no exception goes unretrieved
            for task in sorted(done, key=in_flight.__getitem__):
                index = in_flight.pop(task)
                try:
                    chunk_results = task.result()
                except Exception as e:
                    if failure is None:
                        failure = (index, e)
                    continue
                results.extend(chunk_results)

            if failure is not None:
                index, error = failure
                logger.error(f"Chunk {index} lookup failed: {str(error)}")
                raise BatchChunkFailed(f"Chunk {index} lookup failed: {str(error)}", chunk_index=index) from error
            admit()
    finally:
        for task in in_flight:
            task.cancel()
        # Outstanding lookups finish unwinding before the batch returns or raises
        if in_flight:
            await asyncio.gather(*in_flight, return_exceptions=True)

    logger.info(f"Resolved {len(results)} objects from {len(ids)} ids")
    return results
