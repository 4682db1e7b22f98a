"""
Instance file loading and saving.

File format (whitespace-separated integers, blank lines ignored)::

    n capacity
    weight_1 value_1
    ...
    weight_n value_n
"""

import logging
from pathlib import Path

from knapsack_heuristics.data.instance import KnapsackInstance
from knapsack_heuristics.types import PathLike
from knapsack_heuristics.utils.error_handler import DataError

logger = logging.getLogger(__name__)


def _parse_ints(line: str, expected: int, where: str, source: str) -> list[int]:
    fields = line.split()
    if len(fields) != expected:
        raise DataError(
            f"{source}: {where} must have {expected} fields, got {len(fields)}: {line.strip()!r}",
            suggestion="Use one 'n capacity' header line followed by one 'weight value' line per item.",
        )
    try:
        numbers = [int(f) for f in fields]
    except ValueError as e:
        raise DataError(
            f"{source}: {where} contains a non-integer field: {line.strip()!r}",
            suggestion="All fields must be whole numbers.",
        ) from e
    if any(x < 0 for x in numbers):
        raise DataError(
            f"{source}: {where} contains a negative number: {line.strip()!r}",
            suggestion="Item count, capacity, weights and values must be >= 0.",
        )
    return numbers


def parse_instance(text: str, name: str | None = None) -> KnapsackInstance:
    """
    Parse instance text into a KnapsackInstance.

    Args:
        text: File contents
        name: Label used in error messages and reports

    Returns:
        Validated KnapsackInstance

    Raises:
        DataError: If the text is malformed or contains negative numbers
    """
    source = name or "<input>"
    lines = [line for line in text.splitlines() if line.strip()]

    if not lines:
        raise DataError(
            f"{source}: file is empty",
            suggestion="The first line must contain the item count and the capacity.",
        )

    n, capacity = _parse_ints(lines[0], 2, "header", source)
    item_lines = lines[1:]

    if len(item_lines) != n:
        raise DataError(
            f"{source}: header declares {n} items but {len(item_lines)} item lines were found",
            suggestion="Make the item count in the header match the number of item lines.",
        )

    pairs = []
    for i, line in enumerate(item_lines, 1):
        weight, value = _parse_ints(line, 2, f"item {i}", source)
        pairs.append((weight, value))

    return KnapsackInstance.from_pairs(capacity, pairs, name=name)


def load_instance(path: PathLike) -> KnapsackInstance:
    """
    Load a knapsack instance from a text file.

    Args:
        path: Path to the instance file

    Returns:
        KnapsackInstance named after the file

    Raises:
        DataError: If the file is missing, unreadable or malformed

    Example:
        >>> instance = load_instance("data/small.txt")
        >>> instance.n_items, instance.capacity
        (3, 50)
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise DataError(
            f"Instance file not found: {path}",
            suggestion="Check that the path exists and is spelled correctly.",
        )

    try:
        text = file_path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise DataError(
            f"Failed to read instance file: {path}",
            suggestion=f"Error: {e}",
        ) from e

    instance = parse_instance(text, name=file_path.name)
    logger.info(
        "Loaded %s: %d items, capacity %d", file_path.name, instance.n_items, instance.capacity
    )
    return instance


def format_instance(instance: KnapsackInstance) -> str:
    """
    Render an instance in the text file format.

    Raises:
        DataError: If an item value is not integral, since the format only
            holds integers
    """
    lines = [f"{instance.n_items} {instance.capacity}"]
    for item in instance.items:
        if item.value != int(item.value):
            raise DataError(
                f"Item {item.id} has non-integer value {item.value}",
                suggestion="Instance files hold integer values only; round values before saving.",
            )
        lines.append(f"{item.weight} {int(item.value)}")
    return "\n".join(lines) + "\n"


def save_instance(instance: KnapsackInstance, path: PathLike) -> Path:
    """
    Save an instance in the text file format.

    Args:
        instance: Instance to write
        path: Output file path (parent directories are created)

    Returns:
        Path the instance was written to
    """
    output_file = Path(path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(format_instance(instance))
    logger.info("Instance saved to %s", output_file)
    return output_file
