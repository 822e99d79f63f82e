from flask import Blueprint, Response, current_app, jsonify, request, stream_with_context

from screcords.business_logic.records import show_all_records, show_subrecords_for_record
from screcords.middlewares.stores import validate_route_param
from screcords.models.store_adapter import StoreAdapter
from screcords.pipeline.sources.subkeys import SubkeySource
from screcords.pipeline.transforms.differ import DiffExploder
from screcords.utils.exceptions import MalformedTreeError

bp = Blueprint('records', __name__)


def _store_names():
    return [store.name for store in current_app.config["SETTINGS"].stores]


def _adapter(store: str) -> StoreAdapter:
    return StoreAdapter.from_config(current_app.config["SETTINGS"].get_store(store))


def _lines(records):
    for record in records:
        yield record + "\n"


def _as_lines(value):
    if isinstance(value, str):
        return value.splitlines()
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return value
    return None


@bp.get("<string:store>")
@validate_route_param(param_name='store', transform_func=_store_names)
def all_records(store):
    """
    Every flat record of every subkey, one per line (text/plain, streamed).
    """
    settings = current_app.config["SETTINGS"]
    records = show_all_records(_adapter(store), separator=settings.separator)
    return Response(stream_with_context(_lines(records)), mimetype="text/plain")


@bp.get("<string:store>/subkeys")
@validate_route_param(param_name='store', transform_func=_store_names)
def subkeys(store):
    return jsonify({
        'status': 'success',
        'store': store,
        'subkeys': list(SubkeySource(_adapter(store)).read())
    })


@bp.get("<string:store>/match")
@validate_route_param(param_name='store', transform_func=_store_names)
def matching_records(store):
    """
    Records at or below a flat record prefix.

    Query:
        record=State,/Network/Interface/en1/IPv4
    """
    settings = current_app.config["SETTINGS"]
    record = request.args.get("record", "")

    if not record.strip():
        return jsonify({'status': 'error', 'message': "Query parameter 'record' is required"}), 400

    try:
        records = list(show_subrecords_for_record(
            _adapter(store),
            record,
            separator=settings.separator,
            strict=settings.strict_resolution,
        ))
    except MalformedTreeError as e:
        return jsonify({'status': 'error', 'subkey': e.subkey, 'message': str(e)}), 502

    return Response("".join(_lines(records)), mimetype="text/plain")


@bp.post("<string:store>/diff")
@validate_route_param(param_name='store', transform_func=_store_names)
def diff_records(store):
    """
    Compare a previous flatten-all output with the current one.

    Request JSON:
        {
            "previous": ["Setup,,CurrentSet,/Sets/1", ...],   // or one newline separated string
            "current": [...]                                   // optional, defaults to the live store
        }

    Response:
        {
            "status": "success",
            "summary": {"added": 1, "changed": 0, "deleted": 2},
            "rows": [{"kind": "INSERT", "key": "...", "value": "..."}, ...]
        }
    """
    settings = current_app.config["SETTINGS"]
    data = request.get_json(silent=True) or {}

    previous = _as_lines(data.get("previous"))
    if previous is None:
        return jsonify({'status': 'error', 'message': "'previous' must be a list of records or a string"}), 400

    if "current" in data:
        current = _as_lines(data["current"])
        if current is None:
            return jsonify({'status': 'error', 'message': "'current' must be a list of records or a string"}), 400
    else:
        current = list(show_all_records(_adapter(store), separator=settings.separator))

    rows = DiffExploder(settings.separator).process(current, previous, metadata={'store': store})

    summary = {'added': 0, 'changed': 0, 'deleted': 0}
    kind_names = {'INSERT': 'added', 'UPDATE': 'changed', 'DELETE': 'deleted'}
    payload = []
    for row in rows:
        summary[kind_names[row.kind.name]] += 1
        item = {'kind': row.kind.name, 'key': row.key, 'value': row.value}
        if 'old' in row.metadata:
            item['old'] = row.metadata['old']
        payload.append(item)

    return jsonify({'status': 'success', 'summary': summary, 'rows': payload})
