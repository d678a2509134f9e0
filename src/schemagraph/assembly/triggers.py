from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..definitions import Category, Definition

logger = logging.getLogger(__name__)

MUTATION = "mutation"
SUBSCRIPTION = "subscription"

LinkedTrigger = Tuple[str, Any]


def _is_root(definition: Definition, identifier: str) -> bool:
    return definition.category is Category.TYPE and definition.identifier == identifier


def _find(definitions: Iterable[Definition], identifier: str) -> Optional[Definition]:
    return next((d for d in definitions if _is_root(d, identifier)), None)


def _triggers_for(mutation_field: str, subscription_fields: Dict[str, Dict[str, Any]]) -> List[LinkedTrigger]:
    linked: List[LinkedTrigger] = []
    for sub_field_name, sub_field_attrs in subscription_fields.items():
        for mutation_names, config in sub_field_attrs.get("triggers") or []:
            if mutation_field in mutation_names:
                linked.append((sub_field_name, config))
    return linked


def link_mutation_triggers(definitions: List[Definition]) -> List[Definition]:
    """Copy subscription trigger declarations onto the mutation fields they name.

    Each mutation field that some subscription field triggers on gains a
    ``triggers`` attr: ``[(subscription_field_name, config), ...]`` in
    subscription field order. Returns a new list; the input is untouched.
    """

    mutation = _find(definitions, MUTATION)
    subscription = _find(definitions, SUBSCRIPTION)
    if mutation is None or subscription is None:
        return list(definitions)

    subscription_fields = subscription.fields
    linked_fields: Dict[str, Dict[str, Any]] = {}
    for field_name, field_attrs in mutation.fields.items():
        triggers = _triggers_for(field_name, subscription_fields)
        if triggers:
            linked_fields[field_name] = {**field_attrs, "triggers": triggers}
            logger.debug("Linked mutation field %s to subscriptions %s", field_name, [t[0] for t in triggers])
        else:
            linked_fields[field_name] = field_attrs

    linked_mutation = mutation.with_attrs(fields=linked_fields)
    return [linked_mutation if _is_root(d, MUTATION) else d for d in definitions]


__all__ = ["MUTATION", "SUBSCRIPTION", "LinkedTrigger", "link_mutation_triggers"]
