"""
Tests for the Reference Service
"""

from django.test import TestCase

from core.models import DayScholarHosteller, Role
from core.services.exceptions import ResourceConflict, ResourceNotFound
from core.services.reference_service import ReferenceService


class ReferenceServiceTestCase(TestCase):
    """Test listing and creating reference rows."""

    def setUp(self):
        self.service = ReferenceService()

    def test_create_and_list_roles(self):
        created = self.service.create('roles', ' student ')

        self.assertEqual(created['name'], 'student')
        self.assertTrue(Role.objects.filter(name='student').exists())
        self.assertEqual(self.service.list('roles'), [created])

    def test_residence_types_use_type_field(self):
        created = self.service.create('residence-types', 'Day Scholar')

        self.assertEqual(created['type'], 'Day Scholar')
        self.assertTrue(DayScholarHosteller.objects.filter(type='Day Scholar').exists())

    def test_duplicate_name_conflicts(self):
        self.service.create('departments', 'Physics')

        with self.assertRaises(ResourceConflict):
            self.service.create('departments', 'physics')

    def test_unknown_kind(self):
        with self.assertRaises(ResourceNotFound):
            self.service.list('planets')
