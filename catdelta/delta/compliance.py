"""Equality and compliance of attribute values.

Compliance is a relaxed equality: a preview value is compliant with a
baseline value when it keeps everything the baseline value required.

* sets     -- the baseline set is a subset of the preview set
* lists    -- every baseline element occurs in the preview list; order and
              duplicates are ignored
* maps     -- every baseline key is present in the preview map with a
              compliant value; extra preview keys are ignored
* anything else, including values of different kinds, must be equal
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Set
from typing import Any


def values_equal(a: Any, b: Any) -> bool:
    """Structural equality of two attribute values.

    Maps and sets compare without regard to order, lists element by element.
    Booleans are never equal to numbers, so ``True`` and ``1`` differ.  Two
    NaNs are equal, so a catalog always equals itself.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        return a.keys() == b.keys() and all(values_equal(value, b[key]) for key, value in a.items())
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Set) and isinstance(b, Set):
        return a == b
    if isinstance(a, (Mapping, list, Set)) or isinstance(b, (Mapping, list, Set)):
        # containers of different kinds, or a container and a scalar
        return False
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True
    return a == b


def is_compliant(baseline: Any, preview: Any) -> bool:
    """Return True if *preview* keeps everything *baseline* requires."""
    if isinstance(baseline, Set) and isinstance(preview, Set):
        return baseline <= preview
    if isinstance(baseline, list) and isinstance(preview, list):
        return all(any(values_equal(element, candidate) for candidate in preview) for element in baseline)
    if isinstance(baseline, Mapping) and isinstance(preview, Mapping):
        return all(key in preview and is_compliant(value, preview[key]) for key, value in baseline.items())
    return values_equal(baseline, preview)
