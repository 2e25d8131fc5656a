# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from .log import DiffFormatError


class DiffEntry(dict):
    """A single edit script entry, with keys "value" and "mask".

    Subclasses dict so that entries serialize to json as-is
    and compare equal to plain {"value": ..., "mask": ...} dicts,
    while still allowing attribute access (entry.value, entry.mask).
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class Mask:
    "Collection of valid values for the mask field in diff entries."
    DELETED = -1
    UNCHANGED = 0
    INSERTED = 1


valid_masks = (Mask.DELETED, Mask.UNCHANGED, Mask.INSERTED)


def op_insert(value):
    "Create a diff entry for a value only present in the target sequence."
    return DiffEntry(value=value, mask=Mask.INSERTED)

def op_delete(value):
    "Create a diff entry for a value only present in the source sequence."
    return DiffEntry(value=value, mask=Mask.DELETED)

def op_unchanged(value):
    "Create a diff entry for a value present in both sequences."
    return DiffEntry(value=value, mask=Mask.UNCHANGED)


def is_valid_diff(diff):
    """Checks whether a diff (list of diff entries) is well formed.

    Returns True, or lets the DiffFormatError propagate.
    """
    validate_diff(diff)
    return True


def validate_diff(diff):
    """Check whether a diff (list of diff entries) is well formed.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(diff, list):
        raise DiffFormatError("Diff must be a list.")
    for e in diff:
        validate_diff_entry(e)


def validate_diff_entry(e):
    """Check that e is a well formed diff entry.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(e, DiffEntry):
        raise DiffFormatError("Diff entry '{}' is not a diff type.".format(e))
    if set(e.keys()) != {"value", "mask"}:
        raise DiffFormatError(
            "Diff entry must have exactly the keys 'value' and 'mask', not {}.".format(
                sorted(e.keys())))
    # bool is an int subclass, but True is not a mask
    mask = e.mask
    if isinstance(mask, bool) or mask not in valid_masks:
        raise DiffFormatError("Invalid diff entry mask {!r}.".format(mask))


def source_values(diff):
    "Values of the source sequence, recovered from a diff."
    return [e.value for e in diff if e.mask != Mask.INSERTED]


def target_values(diff):
    "Values of the target sequence, recovered from a diff."
    return [e.value for e in diff if e.mask != Mask.DELETED]


def diff_stats(diff):
    """Count the entries of a diff by kind.

    Returns a dict with the keys "inserted", "deleted" and "unchanged".
    """
    stats = {"inserted": 0, "deleted": 0, "unchanged": 0}
    names = {
        Mask.INSERTED: "inserted",
        Mask.DELETED: "deleted",
        Mask.UNCHANGED: "unchanged",
    }
    for e in diff:
        stats[names[e.mask]] += 1
    return stats


def to_json(diff, indent=None):
    "Serialize a diff to a json string."
    validate_diff(diff)
    if indent:
        return json.dumps(diff, indent=indent, separators=(",", ": "))
    return json.dumps(diff)


def to_diffentry_dicts(di):
    "Convert plain dicts (as loaded from json) to DiffEntry instances."
    if not isinstance(di, list):
        raise DiffFormatError("Diff must be a list.")
    out = []
    for e in di:
        if not isinstance(e, dict):
            raise DiffFormatError("Diff entry '{}' is not a mapping.".format(e))
        out.append(DiffEntry(e))
    return out


def from_json(text):
    "Load and validate a diff from a json string."
    try:
        loaded = json.loads(text)
    except ValueError as e:
        raise DiffFormatError("Diff is not valid json: {}".format(e))
    diff = to_diffentry_dicts(loaded)
    validate_diff(diff)
    return diff
