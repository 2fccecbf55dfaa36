"""
Gate pass service for Arivu.

Students request a gate pass to leave campus; staff approve or reject it and
the pass is closed when the student returns.

Status transitions:
    Pending  -> Approved | Rejected
    Approved -> Returned
"""

import logging
from typing import Any, Dict, List, Optional

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from core.models import Department, GatePass, GatePassStatus
from core.services.exceptions import InvalidStateTransition, ResourceNotFound

User = get_user_model()

logger = logging.getLogger(__name__)


def _isoformat(value):
    return value.isoformat() if value else None


def serialize_gate_pass(gate_pass: GatePass) -> Dict[str, Any]:
    return {
        'id': gate_pass.id,
        'student': {
            'id': gate_pass.student.id,
            'name': gate_pass.student.name,
            'sin_number': gate_pass.student.sin_number,
        },
        'department': (
            {'id': gate_pass.department.id, 'name': gate_pass.department.name}
            if gate_pass.department else None
        ),
        'reason': gate_pass.reason,
        'destination': gate_pass.destination,
        'out_time': _isoformat(gate_pass.out_time),
        'expected_return_time': _isoformat(gate_pass.expected_return_time),
        'in_time': _isoformat(gate_pass.in_time),
        'status': gate_pass.status,
        'approved_by': (
            {'id': gate_pass.approved_by.id, 'name': gate_pass.approved_by.name}
            if gate_pass.approved_by else None
        ),
        'remarks': gate_pass.remarks,
        'decided_at': _isoformat(gate_pass.decided_at),
        'created_at': _isoformat(gate_pass.created_at),
    }


class GatePassService:
    """Service for creating and moving gate passes through their lifecycle."""

    def _queryset(self):
        return GatePass.objects.select_related('student', 'department', 'approved_by')

    def _get(self, gate_pass_id: int) -> GatePass:
        try:
            return self._queryset().get(pk=gate_pass_id)
        except GatePass.DoesNotExist:
            raise ResourceNotFound(f"Gate pass with ID {gate_pass_id} not found")

    def _get_user(self, user_id: int, label: str = 'User'):
        try:
            return User.objects.select_related('department').get(pk=user_id)
        except User.DoesNotExist:
            raise ResourceNotFound(f"{label} with ID {user_id} not found")

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a pending gate pass.

        The department defaults to the student's own department.

        Args:
            data: Cleaned GatePassForm data

        Returns:
            Serialized gate pass

        Raises:
            ResourceNotFound: If the student or department does not exist
        """
        student = self._get_user(data['student_id'], label='Student')

        department = student.department
        if data.get('department_id'):
            try:
                department = Department.objects.get(pk=data['department_id'])
            except Department.DoesNotExist:
                raise ResourceNotFound(f"Department with ID {data['department_id']} not found")

        gate_pass = GatePass.objects.create(
            student=student,
            department=department,
            reason=data['reason'],
            destination=data.get('destination') or '',
            out_time=data['out_time'],
            expected_return_time=data.get('expected_return_time'),
        )
        logger.info(f"Created gate pass {gate_pass.id} for user {student.id}")

        return serialize_gate_pass(self._get(gate_pass.id))

    def list(self, status: Optional[str] = None, student_id: Optional[int] = None) -> List[Dict[str, Any]]:
        """List gate passes, newest first, optionally filtered by status and student."""
        gate_passes = self._queryset()
        if status:
            gate_passes = gate_passes.filter(status=status)
        if student_id:
            gate_passes = gate_passes.filter(student_id=student_id)
        return [serialize_gate_pass(gp) for gp in gate_passes]

    def get(self, gate_pass_id: int) -> Dict[str, Any]:
        return serialize_gate_pass(self._get(gate_pass_id))

    @transaction.atomic
    def _decide(self, gate_pass_id: int, status: str, approver_id: Optional[int], remarks: str) -> Dict[str, Any]:
        gate_pass = self._get(gate_pass_id)

        if gate_pass.status != GatePassStatus.PENDING:
            raise InvalidStateTransition(
                f"Gate pass {gate_pass_id} is {gate_pass.status}, only Pending passes can be decided"
            )

        gate_pass.status = status
        gate_pass.approved_by = self._get_user(approver_id) if approver_id else None
        gate_pass.remarks = remarks or ''
        gate_pass.decided_at = timezone.now()
        gate_pass.save()

        logger.info(f"Gate pass {gate_pass_id} {status.lower()} by user {approver_id}")
        return serialize_gate_pass(gate_pass)

    def approve(self, gate_pass_id: int, approver_id: Optional[int] = None, remarks: str = '') -> Dict[str, Any]:
        """
        Approve a pending gate pass.

        Raises:
            ResourceNotFound: If the pass or approver does not exist
            InvalidStateTransition: If the pass is not pending
        """
        return self._decide(gate_pass_id, GatePassStatus.APPROVED, approver_id, remarks)

    def reject(self, gate_pass_id: int, approver_id: Optional[int] = None, remarks: str = '') -> Dict[str, Any]:
        return self._decide(gate_pass_id, GatePassStatus.REJECTED, approver_id, remarks)

    @transaction.atomic
    def mark_returned(self, gate_pass_id: int) -> Dict[str, Any]:
        """Record the student's return on an approved pass."""
        gate_pass = self._get(gate_pass_id)

        if gate_pass.status != GatePassStatus.APPROVED:
            raise InvalidStateTransition(
                f"Gate pass {gate_pass_id} is {gate_pass.status}, only Approved passes can be returned"
            )

        gate_pass.status = GatePassStatus.RETURNED
        gate_pass.in_time = timezone.now()
        gate_pass.save()

        logger.info(f"Gate pass {gate_pass_id} returned")
        return serialize_gate_pass(gate_pass)

    def delete(self, gate_pass_id: int):
        deleted, _ = GatePass.objects.filter(pk=gate_pass_id).delete()
        if not deleted:
            raise ResourceNotFound(f"Gate pass with ID {gate_pass_id} not found")
        logger.info(f"Deleted gate pass {gate_pass_id}")
