"""Tests for the flatten-all / flatten-matching entry points."""

import pytest

from screcords.business_logic.records import (
    find_subkey_for_record,
    show_all_records,
    show_subkey_records,
    show_subrecords_for_record,
)
from screcords.utils.exceptions import MalformedTreeError, StoreUnavailableError


EXPECTED_ALL = [
    "Setup,,CurrentSet,/Sets/73C34124",
    "Setup,,LastUpdated,05/29/2015 15:35:21",
    "Setup,/Network/Global/IPv4,ServiceOrder,0,0F4E1ECE",
    "Setup,/Network/Global/IPv4,ServiceOrder,1,1DDF4F0B",
    "State,/Network/Global/IPv4,PrimaryInterface,en1",
    "State,/Network/Global/IPv4,PrimaryService,0F4E1ECE",
    "State,/Network/Interface/en1/IPv4,Addresses,0,192.168.0.4",
    "State,/Network/Interface/en1/IPv4,BroadcastAddresses,0,192.168.0.255",
    "State,/Network/Interface/en1/IPv4,SubnetMasks,0,255.255.255.0",
    "com.apple.smb,SigningEnabled,TRUE",
    "com.apple.smb,SigningRequired,FALSE",
]


# ---------------------------------------------------------------------------
# show_all_records
# ---------------------------------------------------------------------------

def test_show_all_records(store):
    assert list(show_all_records(store)) == EXPECTED_ALL

def test_show_all_records_is_repeatable(store):
    assert list(show_all_records(store)) == list(show_all_records(store))

def test_show_all_records_is_lazy(store):
    records = show_all_records(store)
    assert next(records) == EXPECTED_ALL[0]

def test_show_all_records_skips_malformed_subkey(raw_store, capsys):
    adapter = raw_store({
        "broken": "<dictionary> {\n  a : <array> {\n    0 : x\n}",
        "good": "<dictionary> {\n  b : 1\n}",
    })
    assert list(show_all_records(adapter)) == ["good,b,1"]
    assert "broken" in capsys.readouterr().err

def test_show_all_records_can_raise_on_malformed(raw_store):
    adapter = raw_store({"broken": "<dictionary> {"})
    with pytest.raises(MalformedTreeError):
        list(show_all_records(adapter, raise_on_malformed=True))

def test_show_all_records_store_unavailable(raw_store):
    adapter = raw_store({})

    def unavailable():
        raise StoreUnavailableError("not populated yet")

    adapter.list_subkeys = unavailable
    assert list(show_all_records(adapter)) == []

def test_show_subkey_records(store):
    assert list(show_subkey_records(store, "com.apple.smb")) == EXPECTED_ALL[-2:]
    assert list(show_subkey_records(store, "com.apple.missing")) == []


# ---------------------------------------------------------------------------
# show_subrecords_for_record
# ---------------------------------------------------------------------------

def test_subrecords_for_subkey_prefix(store):
    prefix = "State,/Network/Interface/en1/IPv4"
    records = list(show_subrecords_for_record(store, prefix))
    assert records == [
        "State,/Network/Interface/en1/IPv4,Addresses,0,192.168.0.4",
        "State,/Network/Interface/en1/IPv4,BroadcastAddresses,0,192.168.0.255",
        "State,/Network/Interface/en1/IPv4,SubnetMasks,0,255.255.255.0",
    ]
    assert all(r == prefix or r.startswith(prefix + ",") for r in records)

def test_subrecords_for_single_value(store):
    records = list(show_subrecords_for_record(store, "State,/Network/Interface/en1/IPv4,Addresses,0"))
    assert records == ["State,/Network/Interface/en1/IPv4,Addresses,0,192.168.0.4"]

def test_subrecords_for_full_record(store):
    record = "State,/Network/Global/IPv4,PrimaryInterface,en1"
    assert list(show_subrecords_for_record(store, record)) == [record]

def test_subrecords_match_is_anchored_on_segments(store):
    assert list(show_subrecords_for_record(store, "State,/Network/Interface/en1/IPv4,Address")) == []

def test_subrecords_unresolved(store):
    assert list(show_subrecords_for_record(store, "Nothing,here")) == []

def test_subrecords_blank_record(store):
    with pytest.raises(ValueError):
        show_subrecords_for_record(store, "  ")

def test_subrecords_malformed_subkey(raw_store):
    adapter = raw_store({"broken": "<dictionary> {\n  a : 1\n"})
    with pytest.raises(MalformedTreeError):
        show_subrecords_for_record(adapter, "broken,a")

def test_find_subkey_for_record(store):
    assert find_subkey_for_record(store, "Setup,/Network/Global/IPv4,ServiceOrder") == "Setup:/Network/Global/IPv4"
    assert find_subkey_for_record(store, "State,/Network/Interface/en1", strict=True) is None
