"""
Role-based permission predicates for the portal.

Every page asks these helpers before rendering create/edit/delete controls.
The backend enforces the same rules; these only decide what the UI offers.

Roles
-----
  - ADMIN:   departments, degree levels and user accounts
  - HOD:     programmes, batches and faculty of their own department
  - STAFF:   create/edit batches, read programmes
  - FACULTY: read programmes and batches, edit their own faculty profile
  - STUDENT: read programmes and batches, edit their own student profile

A missing profile (not logged in, or /auth/me failed) is denied everything.
"""
from sms_portal.schemas.user import Role


def role_of(profile) -> Role:
    """Role of a profile; None when unknown."""
    if profile is None:
        return None
    return Role.parse(getattr(profile, "user_type", None))


def has_role(profile, *roles) -> bool:
    role = role_of(profile)
    return role is not None and role in roles


def is_admin(profile) -> bool:
    return has_role(profile, Role.ADMIN)


def is_hod(profile) -> bool:
    return has_role(profile, Role.HOD)


def is_staff(profile) -> bool:
    return has_role(profile, Role.STAFF)


def is_faculty(profile) -> bool:
    return has_role(profile, Role.FACULTY)


def is_student(profile) -> bool:
    return has_role(profile, Role.STUDENT)


# ---- Administration (ADMIN) ------------------------------------------------


def can_manage_departments(profile) -> bool:
    return is_admin(profile)


def can_manage_degrees(profile) -> bool:
    return is_admin(profile)


def can_manage_users(profile) -> bool:
    return is_admin(profile)


# ---- Department management (HOD / STAFF) -----------------------------------


def can_create_edit_programmes(profile) -> bool:
    return is_hod(profile)


def can_delete_programmes(profile) -> bool:
    return is_hod(profile)


def can_create_edit_batches(profile) -> bool:
    return has_role(profile, Role.HOD, Role.STAFF)


def can_delete_batches(profile) -> bool:
    return is_hod(profile)


def can_create_edit_faculty(profile) -> bool:
    return is_hod(profile)


def can_delete_faculty(profile) -> bool:
    return is_hod(profile)


def can_update_faculty_profile(profile, faculty) -> bool:
    """
    HODs may update any faculty profile in their department.
    A faculty member may update only their own, matched on email.
    """
    if is_hod(profile):
        return True
    if not is_faculty(profile) or faculty is None:
        return False

    own_email = (getattr(profile, "email", None) or "").strip().lower()
    faculty_email = (getattr(faculty, "email", None) or "").strip().lower()
    return bool(own_email) and own_email == faculty_email
