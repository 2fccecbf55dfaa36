"""
User management service for Arivu.

Create, list, update and delete campus users (students and staff). Foreign
keys to reference data are passed as plain ids and verified before any write.
Password hashes never leave this module: callers receive serialized dicts.
"""

import logging
from typing import Any, Dict, List, Optional

from django.contrib.auth import get_user_model
from django.db import transaction

from core.models import College, DayScholarHosteller, Department, Quota, Role, STUDENT_ROLE_NAME
from core.services.exceptions import ResourceConflict, ResourceNotFound

User = get_user_model()

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20

RELATED_FIELDS = ('role', 'quota', 'department', 'college', 'dayscholar_hosteller')

# (id field, model, label used in error messages)
FOREIGN_KEYS = (
    ('role_id', Role, 'Role'),
    ('quota_id', Quota, 'Quota'),
    ('department_id', Department, 'Department'),
    ('college_id', College, 'College'),
    ('dayscholar_hosteller_id', DayScholarHosteller, 'Day Scholar/Hosteller'),
)

PROFILE_FIELDS = ('sin_number', 'name', 'email', 'father_name', 'year', 'batch', 'phone')


def _related(obj, label_field='name') -> Optional[Dict[str, Any]]:
    if obj is None:
        return None
    return {'id': obj.id, label_field: getattr(obj, label_field)}


def serialize_user(user) -> Dict[str, Any]:
    """
    Convert a User to a JSON-safe dict without the password hash.

    Args:
        user: User instance (related rows should be preloaded)

    Returns:
        Dict with profile fields and nested reference objects
    """
    return {
        'id': user.id,
        'sin_number': user.sin_number,
        'name': user.name,
        'email': user.email,
        'father_name': user.father_name,
        'year': user.year,
        'batch': user.batch,
        'phone': user.phone,
        'role': _related(user.role),
        'quota': _related(user.quota),
        'department': _related(user.department),
        'college': _related(user.college),
        'dayscholar_hosteller': _related(user.dayscholar_hosteller, 'type'),
        'created_at': user.created_at.isoformat() if user.created_at else None,
        'updated_at': user.updated_at.isoformat() if user.updated_at else None,
    }


class UserService:
    """
    Service for campus user records.

    Example:
        >>> service = UserService()
        >>> user = service.create({'name': 'Asha', 'email': 'asha@example.edu',
        ...                        'password': 'secret123', 'role_id': 1})
        >>> service.find_all(page=1, limit=20)['total']
        1
    """

    def _get_user(self, user_id: int):
        try:
            return User.objects.select_related(*RELATED_FIELDS).get(pk=user_id)
        except User.DoesNotExist:
            raise ResourceNotFound(f"User with ID {user_id} not found")

    def _verify_foreign_keys(self, data: Dict[str, Any]):
        """
        Check that every referenced row exists.

        Raises:
            ResourceNotFound: e.g. "Role with ID 7 not found"
        """
        for field, model, label in FOREIGN_KEYS:
            value = data.get(field)
            if value and not model.objects.filter(pk=value).exists():
                raise ResourceNotFound(f"{label} with ID {value} not found")

    def _check_unique(self, data: Dict[str, Any], exclude_id: Optional[int] = None):
        users = User.objects.all()
        if exclude_id is not None:
            users = users.exclude(pk=exclude_id)

        email = data.get('email')
        if email and users.filter(email__iexact=email).exists():
            raise ResourceConflict('Email already in use')

        sin_number = data.get('sin_number')
        if sin_number and users.filter(sin_number=sin_number).exists():
            raise ResourceConflict('SIN number already in use')

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a user.

        Args:
            data: Cleaned UserCreateForm data (password in clear text)

        Returns:
            Serialized user

        Raises:
            ResourceConflict: If email or SIN number is already in use
            ResourceNotFound: If a referenced reference row does not exist
        """
        self._check_unique(data)
        self._verify_foreign_keys(data)

        extra_fields = {
            field: data.get(field)
            for field in PROFILE_FIELDS
            if field not in ('name', 'email') and data.get(field) not in (None, '')
        }
        for field, _model, _label in FOREIGN_KEYS:
            if data.get(field):
                extra_fields[field] = data[field]

        user = User.objects.create_user(
            email=data['email'],
            name=data['name'],
            password=data['password'],
            **extra_fields
        )
        logger.info(f"Created user {user.id} ({user.email})")

        return serialize_user(self._get_user(user.id))

    def find_all(self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> Dict[str, Any]:
        """
        List users ordered by id.

        Args:
            page: 1-based page number
            limit: Page size

        Returns:
            {'users': [...], 'total': <count of all users>}
        """
        page = max(page, 1)
        limit = max(limit, 1)
        offset = (page - 1) * limit

        users = User.objects.select_related(*RELATED_FIELDS).order_by('id')
        return {
            'users': [serialize_user(u) for u in users[offset:offset + limit]],
            'total': users.count(),
        }

    def find_one(self, user_id: int) -> Dict[str, Any]:
        return serialize_user(self._get_user(user_id))

    def find_by_email(self, email: str):
        """
        Fetch the User model for an email address (used for authentication).

        Raises:
            ResourceNotFound: If no user has this email
        """
        try:
            return User.objects.select_related('role').get(email__iexact=email)
        except User.DoesNotExist:
            raise ResourceNotFound(f"User with email {email} not found")

    @transaction.atomic
    def update(self, user_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply a partial update.

        Args:
            user_id: User primary key
            data: Only the fields to change (UserUpdateForm.changed_values())

        Returns:
            Serialized user after the update
        """
        user = self._get_user(user_id)

        self._check_unique(data, exclude_id=user.id)
        if any(field in data for field, _model, _label in FOREIGN_KEYS):
            self._verify_foreign_keys(data)

        for field in PROFILE_FIELDS:
            if field in data:
                value = data[field]
                if field == 'sin_number' and not value:
                    value = None
                elif field == 'year' and value == '':
                    value = None
                setattr(user, field, value)

        for field, _model, _label in FOREIGN_KEYS:
            if field in data:
                setattr(user, field, data[field] or None)

        if data.get('password'):
            user.set_password(data['password'])

        user.save()
        logger.info(f"Updated user {user.id}")

        return serialize_user(self._get_user(user.id))

    def remove(self, user_id: int):
        deleted, _ = User.objects.filter(pk=user_id).delete()
        if not deleted:
            raise ResourceNotFound(f"User with ID {user_id} not found")
        logger.info(f"Deleted user {user_id}")

    def find_all_students(self) -> List[Dict[str, Any]]:
        """
        List every user with the student role.

        Raises:
            ResourceNotFound: If the 'student' role has not been created
        """
        try:
            student_role = Role.objects.get(name=STUDENT_ROLE_NAME)
        except Role.DoesNotExist:
            raise ResourceNotFound('Student role not found')

        students = (
            User.objects.select_related(*RELATED_FIELDS)
            .filter(role=student_role)
            .order_by('id')
        )
        return [serialize_user(s) for s in students]
