from django.db import models
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.core.validators import MinValueValidator, MaxValueValidator
from django.utils.translation import gettext_lazy as _
from django.utils import timezone


STUDENT_ROLE_NAME = 'student'


# Enums as TextChoices
class GatePassStatus(models.TextChoices):
    PENDING = 'Pending', _('Pending')
    APPROVED = 'Approved', _('Approved')
    REJECTED = 'Rejected', _('Rejected')
    RETURNED = 'Returned', _('Returned')


# Custom User Manager
class UserManager(BaseUserManager):
    def create_user(self, email, name, password=None, **extra_fields):
        if not email:
            raise ValueError(_('The Email must be set'))
        if not name:
            raise ValueError(_('The Name must be set'))

        email = self.normalize_email(email)
        user = self.model(email=email, name=name, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, name, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError(_('Superuser must have is_staff=True.'))
        if extra_fields.get('is_superuser') is not True:
            raise ValueError(_('Superuser must have is_superuser=True.'))

        return self.create_user(email, name, password, **extra_fields)


# Reference data
class Role(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class Quota(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class Department(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class College(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class DayScholarHosteller(models.Model):
    """Residence type of a student (e.g. 'Day Scholar', 'Hosteller')."""
    type = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ['type']
        verbose_name = _('Day Scholar/Hosteller')
        verbose_name_plural = _('Day Scholar/Hosteller types')

    def __str__(self):
        return self.type


class User(AbstractBaseUser, PermissionsMixin):
    sin_number = models.CharField(max_length=50, unique=True, null=True, blank=True,
                                  help_text=_('Student identification number'))
    name = models.CharField(max_length=255)
    email = models.EmailField(unique=True)
    father_name = models.CharField(max_length=255, blank=True)
    year = models.PositiveSmallIntegerField(
        null=True, blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(6)],
    )
    batch = models.CharField(max_length=20, blank=True)
    phone = models.CharField(max_length=20, blank=True)

    role = models.ForeignKey(Role, on_delete=models.SET_NULL, null=True, blank=True, related_name='users')
    quota = models.ForeignKey(Quota, on_delete=models.SET_NULL, null=True, blank=True, related_name='users')
    department = models.ForeignKey(Department, on_delete=models.SET_NULL, null=True, blank=True, related_name='users')
    college = models.ForeignKey(College, on_delete=models.SET_NULL, null=True, blank=True, related_name='users')
    dayscholar_hosteller = models.ForeignKey(
        DayScholarHosteller, on_delete=models.SET_NULL, null=True, blank=True, related_name='users'
    )

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.name} ({self.email})"

    @property
    def is_student(self):
        return self.role is not None and self.role.name == STUDENT_ROLE_NAME


class GatePass(models.Model):
    """
    Permission for a student to leave campus.

    Lifecycle: Pending -> Approved | Rejected; Approved -> Returned.
    """
    student = models.ForeignKey(User, on_delete=models.CASCADE, related_name='gate_passes')
    department = models.ForeignKey(Department, on_delete=models.SET_NULL, null=True, blank=True,
                                   related_name='gate_passes')
    reason = models.CharField(max_length=500)
    destination = models.CharField(max_length=255, blank=True)
    out_time = models.DateTimeField()
    expected_return_time = models.DateTimeField(null=True, blank=True)
    in_time = models.DateTimeField(null=True, blank=True, help_text=_('Actual return time'))
    status = models.CharField(max_length=20, choices=GatePassStatus.choices, default=GatePassStatus.PENDING)
    approved_by = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True,
                                    related_name='decided_gate_passes')
    remarks = models.CharField(max_length=500, blank=True)
    decided_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='core_gatepa_status_6b1f0e_idx'),
            models.Index(fields=['student', 'status'], name='core_gatepa_student_3d9c2a_idx'),
        ]

    def __str__(self):
        return f"Gate pass #{self.pk} for {self.student.name} ({self.status})"
