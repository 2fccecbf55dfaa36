"""
Reference data service for Arivu.

Roles, quotas, departments, colleges and residence types are small lookup
tables referenced by users and gate passes.
"""

import logging
from typing import Any, Dict, List

from django.db import IntegrityError, transaction

from core.models import College, DayScholarHosteller, Department, Quota, Role
from core.services.exceptions import ResourceConflict, ResourceNotFound

logger = logging.getLogger(__name__)

# kind -> (model, label field, label used in messages)
REFERENCE_TYPES = {
    'roles': (Role, 'name', 'Role'),
    'quotas': (Quota, 'name', 'Quota'),
    'departments': (Department, 'name', 'Department'),
    'colleges': (College, 'name', 'College'),
    'residence-types': (DayScholarHosteller, 'type', 'Day Scholar/Hosteller'),
}


class ReferenceService:
    """List and create reference rows by kind (e.g. 'roles', 'residence-types')."""

    def _lookup(self, kind: str):
        try:
            return REFERENCE_TYPES[kind]
        except KeyError:
            raise ResourceNotFound(f"Unknown reference type: {kind}")

    def list(self, kind: str) -> List[Dict[str, Any]]:
        model, field, _label = self._lookup(kind)
        return [
            {'id': obj_id, field: value}
            for obj_id, value in model.objects.values_list('id', field)
        ]

    def create(self, kind: str, name: str) -> Dict[str, Any]:
        """
        Create a reference row.

        Args:
            kind: Reference type key
            name: Display name (stored in 'type' for residence types)

        Returns:
            {'id': ..., <label field>: name}

        Raises:
            ResourceConflict: If a row with the same name exists
        """
        model, field, label = self._lookup(kind)
        name = name.strip()

        if model.objects.filter(**{f'{field}__iexact': name}).exists():
            raise ResourceConflict(f"{label} '{name}' already exists")

        try:
            with transaction.atomic():
                obj = model.objects.create(**{field: name})
        except IntegrityError:
            raise ResourceConflict(f"{label} '{name}' already exists")

        logger.info(f"Created {label} {obj.id} ({name})")
        return {'id': obj.id, field: name}
