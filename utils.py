# utils.py
import logging
import re

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# numeric brackets above this stay object keys (a[999]=x -> {"999": "x"})
ARRAY_LIMIT = 20

_KEY_PART = re.compile(r"\[([^\[\]]*)\]")


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


class _Indexed(dict):
    """List under construction: index -> value, compacted on output."""


def _split_key(key: str) -> list:
    """'a[b][]' -> ['a', 'b', '']"""
    head = key.split("[", 1)[0]
    rest = key[len(head):]
    parts = _KEY_PART.findall(rest)
    # malformed brackets: treat the whole thing as a flat key
    if not head or "".join(f"[{p}]" for p in parts) != rest:
        return [key]
    return [head] + parts


def _wrap(parts: list, value: str) -> dict:
    leaf = value
    for part in reversed(parts[1:]):
        if part == "":
            leaf = _Indexed({0: leaf})
        elif part.isdigit() and int(part) <= ARRAY_LIMIT:
            leaf = _Indexed({int(part): leaf})
        else:
            leaf = {part: leaf}
    return {parts[0]: leaf}


def _push(target: _Indexed, value) -> _Indexed:
    target[max(target, default=-1) + 1] = value
    return target


def _as_object(indexed: _Indexed) -> dict:
    return {str(k): v for k, v in indexed.items()}


def _merge(target, source):
    if not isinstance(source, dict):
        if isinstance(target, _Indexed):
            return _push(target, source)
        if isinstance(target, dict):
            # bare key next to nested ones: a[b]=1&a=x -> {"b": "1", "x": True}
            target[source] = True
            return target
        return _Indexed({0: target, 1: source})

    if not isinstance(target, dict):
        # scalar then nested: a=1&a[b]=2 -> ["1", {"b": "2"}]
        merged = _Indexed({0: target})
        if isinstance(source, _Indexed):
            for k in sorted(source):
                _push(merged, source[k])
        else:
            _push(merged, source)
        return merged

    if isinstance(target, _Indexed) and isinstance(source, _Indexed):
        for i, item in source.items():
            if i not in target:
                target[i] = item
            elif isinstance(target[i], dict) and isinstance(item, dict):
                target[i] = _merge(target[i], item)
            else:
                _push(target, item)
        return target

    # list meets object: the list turns into an object keyed by index
    if isinstance(target, _Indexed):
        target = _as_object(target)
    if isinstance(source, _Indexed):
        source = _as_object(source)
    for k, v in source.items():
        target[k] = _merge(target[k], v) if k in target else v
    return target


def _compact(value):
    if isinstance(value, _Indexed):
        return [_compact(value[k]) for k in sorted(value)]
    if isinstance(value, dict):
        return {k: _compact(v) for k, v in value.items()}
    return value


def parse_nested_form(items) -> dict:
    """Expand bracketed form keys into nested dicts and lists.

    Follows the usual "extended" urlencoded rules:

    - ``a[b]=1&a[c]=2`` gives ``{"a": {"b": "1", "c": "2"}}``
    - ``d[]=x&d[]=y`` and ``d[0]=x&d[1]=y`` give ``{"d": ["x", "y"]}``;
      sparse indices are compacted, so ``d[3]=x`` gives ``["x"]``
    - repeated plain keys collect into a list
    - mixing list items with named keys (``d[]=x&d[k]=y``) gives an object
      keyed by index: ``{"0": "x", "k": "y"}``
    - a scalar followed by a nested key keeps both: ``a=1&a[b]=2`` gives
      ``["1", {"b": "2"}]``
    """
    out = {}
    for key, value in items:
        out = _merge(out, _wrap(_split_key(key), value))
    return _compact(out)
