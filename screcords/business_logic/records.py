import sys
from typing import Iterator, Optional

from screcords.business_logic.subkey_resolver import resolve_subkey
from screcords.models.store_adapter import StoreAdapter
from screcords.pipeline.sources.subkeys import SubkeySource
from screcords.pipeline.transforms.fetcher import TreeFetcher
from screcords.pipeline.transforms.flattener import Flattenizer
from screcords.settings import DEFAULT_SEPARATOR
from screcords.utils.exceptions import MalformedTreeError


def show_subkey_records(
        adapter: StoreAdapter,
        subkey: str,
        separator: str = DEFAULT_SEPARATOR,
) -> Iterator[str]:
    """Flat records of a single subkey. A missing subkey yields nothing."""
    tokens = TreeFetcher(adapter).process(subkey)
    return Flattenizer(separator).process(tokens)


def show_all_records(
        adapter: StoreAdapter,
        separator: str = DEFAULT_SEPARATOR,
        raise_on_malformed: bool = False,
) -> Iterator[str]:
    """
    Every record of every subkey, subkeys in enumeration order.

    A subkey whose dump has unbalanced braces is reported on stderr and
    skipped as a whole, unless ``raise_on_malformed`` is set.
    """
    fetcher = TreeFetcher(adapter)
    flattener = Flattenizer(separator)

    for subkey in SubkeySource(adapter).read():
        try:
            tokens = fetcher.process(subkey)
        except MalformedTreeError as e:
            if raise_on_malformed:
                raise
            print(f"❌ [Records] Skipping subkey '{subkey}': {e}", file=sys.stderr)
            continue

        yield from flattener.process(tokens)


def find_subkey_for_record(
        adapter: StoreAdapter,
        record: str,
        separator: str = DEFAULT_SEPARATOR,
        strict: bool = False,
) -> Optional[str]:
    return resolve_subkey(record, SubkeySource(adapter).read(), separator=separator, strict=strict)


def show_subrecords_for_record(
        adapter: StoreAdapter,
        record: str,
        separator: str = DEFAULT_SEPARATOR,
        strict: bool = False,
) -> Iterator[str]:
    """
    Records at or below a flat record prefix.

    `State,/Network/Interface/en1/IPv4` yields the `Addresses`, `SubnetMasks`...
    records of that subkey; `State,/Network/Interface/en1/IPv4,Addresses,0`
    yields just the one address. An unresolvable prefix yields nothing.

    Raises:
        ValueError: If the record is blank
        MalformedTreeError: If the owning subkey's dump is unbalanced
    """
    if not record or not record.strip():
        raise ValueError("A flat record or record prefix is required")

    subkey = find_subkey_for_record(adapter, record, separator=separator, strict=strict)
    if not subkey:
        print(f"[Records] No subkey found for record '{record}'", file=sys.stderr)
        return iter(())

    # Fetch eagerly so a malformed tree is reported before any record is produced
    tokens = TreeFetcher(adapter).process(subkey)
    prefix = record + separator
    return (
        line for line in Flattenizer(separator).process(tokens)
        if line == record or line.startswith(prefix)
    )
