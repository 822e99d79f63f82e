import argparse
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from screcords.business_logic.records import show_all_records, show_subrecords_for_record
from screcords.models.store_adapter import StoreAdapter
from screcords.pipeline.sinks.stream import DiffSink, LineSink
from screcords.pipeline.transforms.differ import DiffExploder
from screcords.settings import Settings, load_config
from screcords.utils.exceptions import MalformedTreeError

DEFAULT_CONFIG = {"stores": [{"name": "local"}]}


def load_settings(config_path) -> Settings:
    """Settings from the config file, or a single local scutil store when there is none."""
    try:
        config_data = load_config(config_path)
    except FileNotFoundError:
        print(f"[Records] {config_path} not found, using the local scutil store", file=sys.stderr)
        config_data = DEFAULT_CONFIG
    return Settings.model_validate(config_data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="screcords", description="Show scutil records, flattened.")
    parser.add_argument("record", nargs="?", help="flat record or prefix, e.g. State,/Network/Interface/en1/IPv4")
    parser.add_argument("--config", default=os.environ.get("SCRECORDS_CONFIG", "config.json"))
    parser.add_argument("--store", help="configured store name (default: the first one)")
    parser.add_argument("--diff", metavar="PREVIOUS", help="compare against an earlier output saved to a file")
    return parser


def main(argv=None, stream=None) -> int:
    """
    `python -m screcords` prints every record of the configured store,
    `python -m screcords "State,/Network/Interface/en1/IPv4"` only the matching ones,
    `python -m screcords --diff before.txt` what changed since `before.txt` was saved.
    """
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    stream = stream or sys.stdout

    try:
        settings = load_settings(args.config)
        store = settings.get_store(args.store) if args.store else settings.stores[0]
    except (ValidationError, ValueError) as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 2
    except (KeyError, IndexError):
        print(f"❌ No store named '{args.store or ''}' is configured", file=sys.stderr)
        return 2

    adapter = StoreAdapter.from_config(store)
    separator = settings.separator

    if args.diff:
        sink = DiffSink(stream, separator=separator)
        previous = Path(args.diff).read_text(encoding="utf-8").splitlines()
        current = list(show_all_records(adapter, separator=separator))
        for row in DiffExploder(separator).process(current, previous, metadata={'store': store.name}):
            sink.write(row)
        sink.flush()
        return 0

    sink = LineSink(stream)
    try:
        if args.record is not None:
            records = show_subrecords_for_record(
                adapter, args.record, separator=separator, strict=settings.strict_resolution
            )
        else:
            records = show_all_records(adapter, separator=separator)
        for record in records:
            sink.write(record)
    except (ValueError, MalformedTreeError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    finally:
        sink.flush()

    return 0


if __name__ == "__main__":
    sys.exit(main())
