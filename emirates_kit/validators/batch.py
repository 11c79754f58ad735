"""
Batch validation over sequences of inputs.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional

from emirates_kit.kit_config import get_config
from .results import BatchEntry, ValidationResult

logger = logging.getLogger(__name__)


def parse_many(
    validate: Callable[[Optional[str]], ValidationResult],
    inputs: Iterable[Optional[str]],
    max_workers: Optional[int] = None,
) -> List[BatchEntry]:
    """
    Validate every input and pair it with its result.

    Never stops early: failed and None inputs get their own entries, and
    the output has one entry per input in input order.

    Args:
        validate: A validator's validate() function
        inputs: Identifiers to validate (None allowed)
        max_workers: Thread pool size (default: configured batch_workers);
            1 validates inline

    Returns:
        List of BatchEntry, same length and order as inputs
    """
    items = list(inputs)
    if not items:
        return []

    workers = max_workers if max_workers is not None else get_config().batch_workers
    if workers <= 1 or len(items) == 1:
        results = [validate(item) for item in items]
    else:
        # executor.map yields in submission order
        with ThreadPoolExecutor(max_workers=min(workers, len(items))) as executor:
            results = list(executor.map(validate, items))

    invalid = sum(1 for r in results if not r.is_valid)
    logger.debug(f"Batch validated {len(items)} item(s), {invalid} invalid")

    return [BatchEntry(input=item, result=result) for item, result in zip(items, results)]
