"""
Tests for the gate pass API endpoints.
"""
import json
from django.test import TestCase, Client
from django.contrib.auth import get_user_model

from core.models import GatePass, GatePassStatus
from core.test_api_users import APITestMixin

User = get_user_model()


class GatePassAPITest(APITestMixin, TestCase):
    """Test /api/gate-passes endpoints."""

    def setUp(self):
        """Set up test data."""
        self.client = Client()
        self.student = User.objects.create_user(
            email='kiran@example.edu',
            name='Kiran',
            password='secret123',
        )
        self.warden = User.objects.create_user(
            email='warden@example.edu',
            name='Warden',
            password='secret123',
        )
        self.authenticate(self.warden)

    def _create(self, **overrides):
        payload = {
            'student_id': self.student.id,
            'reason': 'Going home for the weekend',
            'out_time': '2030-01-10T09:00:00Z',
            'expected_return_time': '2030-01-12T18:00:00Z',
        }
        payload.update(overrides)
        return self.send_json('post', '/api/gate-passes', payload)

    def test_create_gate_pass(self):
        response = self._create()

        self.assertEqual(response.status_code, 201)
        data = json.loads(response.content)
        self.assertEqual(data['status'], GatePassStatus.PENDING)
        self.assertEqual(data['student']['name'], 'Kiran')

    def test_return_time_must_follow_out_time(self):
        response = self._create(expected_return_time='2030-01-09T09:00:00Z')

        self.assertEqual(response.status_code, 400)
        self.assertIn('expected_return_time', json.loads(response.content)['details'])

    def test_unknown_student(self):
        response = self._create(student_id=4040)
        self.assertEqual(response.status_code, 404)

    def test_approve_uses_token_user(self):
        gate_pass_id = json.loads(self._create().content)['id']

        response = self.send_json('post', f'/api/gate-passes/{gate_pass_id}/approve', {'remarks': 'Safe travels'})

        self.assertEqual(response.status_code, 200)
        data = json.loads(response.content)
        self.assertEqual(data['status'], GatePassStatus.APPROVED)
        self.assertEqual(data['approved_by']['id'], self.warden.id)

    def test_reject_twice(self):
        gate_pass_id = json.loads(self._create().content)['id']
        self.send_json('post', f'/api/gate-passes/{gate_pass_id}/reject', {})

        response = self.send_json('post', f'/api/gate-passes/{gate_pass_id}/reject', {})

        self.assertEqual(response.status_code, 400)

    def test_return_flow(self):
        gate_pass_id = json.loads(self._create().content)['id']
        self.send_json('post', f'/api/gate-passes/{gate_pass_id}/approve', {})

        response = self.send_json('post', f'/api/gate-passes/{gate_pass_id}/return', {})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(json.loads(response.content)['status'], GatePassStatus.RETURNED)

    def test_list_and_filter(self):
        self._create()
        second_id = json.loads(self._create(reason='Hospital visit').content)['id']
        self.send_json('post', f'/api/gate-passes/{second_id}/approve', {})

        response = self.get_json('/api/gate-passes', status='Approved')

        self.assertEqual(response.status_code, 200)
        gate_passes = json.loads(response.content)['gate_passes']
        self.assertEqual([gp['id'] for gp in gate_passes], [second_id])

        response = self.get_json('/api/gate-passes', status='Lost')
        self.assertEqual(response.status_code, 400)

    def test_detail_and_delete(self):
        gate_pass_id = json.loads(self._create().content)['id']

        self.assertEqual(self.get_json(f'/api/gate-passes/{gate_pass_id}').status_code, 200)

        response = self.client.delete(f'/api/gate-passes/{gate_pass_id}', **self.headers)
        self.assertEqual(response.status_code, 204)
        self.assertFalse(GatePass.objects.filter(pk=gate_pass_id).exists())
        self.assertEqual(self.get_json(f'/api/gate-passes/{gate_pass_id}').status_code, 404)
