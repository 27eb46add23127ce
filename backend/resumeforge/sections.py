from typing import Iterable, List, Sequence

# Sections the model may reorder, in their default order.
DYNAMIC_SECTIONS = ("education", "skills", "experience", "projects")
# Always rendered last, in this order. The header is never part of the order.
STATIC_SECTIONS = ("certifications", "achievements")


def default_section_order() -> List[str]:
    return [*DYNAMIC_SECTIONS, *STATIC_SECTIONS]


def reconcile(current_order: Sequence[str], suggested: Iterable[object]) -> List[str]:
    """Merge a suggested ordering into a complete section order.

    Matching is case-insensitive. Unknown names and non-strings are dropped,
    duplicates keep their first position, and any dynamic section the
    suggestion left out is appended in default order. The static sections
    always close the list. Never fails.

    ``current_order`` is accepted for symmetry with the caller; the
    suggestion alone decides the dynamic part.
    """
    picked: List[str] = []
    for name in suggested or ():
        if not isinstance(name, str):
            continue
        key = name.strip().lower()
        if key in DYNAMIC_SECTIONS and key not in picked:
            picked.append(key)
    picked.extend(s for s in DYNAMIC_SECTIONS if s not in picked)
    return picked + list(STATIC_SECTIONS)


def is_valid_order(order: Sequence[str]) -> bool:
    dynamic, static = list(order[:len(DYNAMIC_SECTIONS)]), list(order[len(DYNAMIC_SECTIONS):])
    return sorted(dynamic) == sorted(DYNAMIC_SECTIONS) and static == list(STATIC_SECTIONS)
