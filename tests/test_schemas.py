"""
Unit Tests for form models and their validation messages
"""
from datetime import date

import pytest
from pydantic import ValidationError

from sms_portal.schemas.account import PasswordChangeForm, ProfileUpdateForm
from sms_portal.schemas.auth import LoginRequest, UserProfile
from sms_portal.schemas.batch import BatchCreate, BatchUpdate, Semester
from sms_portal.schemas.common import blank_to_none, format_validation_errors
from sms_portal.schemas.degree import DegreeForm
from sms_portal.schemas.department import DepartmentForm
from sms_portal.schemas.faculty import DeleteFacultyResponse, FacultyCreate, FacultyUpdate
from sms_portal.schemas.profile import Address, AddressForm, FacultyProfileForm, StudentProfileForm
from sms_portal.schemas.programme import ProgrammeCreate, ProgrammeUpdate
from sms_portal.schemas.user import Role


def messages(model, **values):
    with pytest.raises(ValidationError) as exc_info:
        model(**values)
    return format_validation_errors(exc_info.value)


class TestCommon:
    def test_blank_to_none(self):
        assert blank_to_none("  ") is None
        assert blank_to_none(None) is None
        assert blank_to_none(" x ") == "x"

    def test_builtin_error_gets_field_label(self):
        """Test non-custom errors are prefixed with the field name"""
        errors = messages(ProgrammeCreate, programme_name="MCA", degree_level_id="abc", minimum_duration_years=2)

        assert len(errors) == 1
        assert errors[0].startswith("Degree level id: ")

    def test_custom_error_passed_through(self):
        assert messages(DegreeForm, level_name=" ") == ["Degree level name is required"]


class TestRole:
    @pytest.mark.parametrize("value", ["admin", " Admin ", "ADMIN", Role.ADMIN])
    def test_parse(self, value):
        assert Role.parse(value) is Role.ADMIN

    @pytest.mark.parametrize("value", [None, "", "principal"])
    def test_parse_unknown(self, value):
        assert Role.parse(value) is None

    def test_profile_role(self):
        profile = UserProfile(user_type="student", email="s@tezu.ac.in", full_name="S")
        assert profile.role is Role.STUDENT


class TestLoginRequest:
    def test_valid(self):
        request = LoginRequest(email=" admin@tezu.ac.in ", password="x")
        assert request.email == "admin@tezu.ac.in"

    def test_bad_email(self):
        assert messages(LoginRequest, email="not-an-email", password="x") == ["Please enter a valid email address"]

    def test_missing_password(self):
        assert messages(LoginRequest, email="admin@tezu.ac.in", password="") == [
            "Please enter both email and password"
        ]


class TestDepartmentForm:
    """Test department code, name and HOD email rules"""

    valid = {"department_code": "CSE", "department_name": "Computer Science", "hod_email": "hod@tezu.ac.in"}

    def test_valid(self):
        form = DepartmentForm(**{**self.valid, "department_code": " CSE1 "})
        assert form.department_code == "CSE1"

    @pytest.mark.parametrize(
        "code,message",
        [
            ("C", "Department code must be at least 2 characters"),
            ("ABCDEFGHIJK", "Department code must not exceed 10 characters"),
            ("cse", "Department code must contain only uppercase letters and numbers"),
            ("CS-E", "Department code must contain only uppercase letters and numbers"),
        ],
    )
    def test_code_rules(self, code, message):
        assert messages(DepartmentForm, **{**self.valid, "department_code": code}) == [message]

    def test_name_too_short(self):
        errors = messages(DepartmentForm, **{**self.valid, "department_name": "CSE"})
        assert errors == ["Department name must be at least 5 characters"]

    def test_name_too_long(self):
        errors = messages(DepartmentForm, **{**self.valid, "department_name": "x" * 101})
        assert errors == ["Department name must not exceed 100 characters"]

    def test_hod_email_required(self):
        assert messages(DepartmentForm, **{**self.valid, "hod_email": "  "}) == ["HOD email is required"]

    def test_hod_email_invalid(self):
        errors = messages(DepartmentForm, **{**self.valid, "hod_email": "hod-at-tezu"})
        assert errors == ["Please enter a valid email address"]


class TestProgrammeForms:
    def test_max_defaults_to_min(self):
        form = ProgrammeCreate(programme_name="B.Tech CSE", degree_level_id=1, minimum_duration_years=4)
        assert form.maximum_duration_years == 4

    def test_min_at_least_one(self):
        errors = messages(ProgrammeCreate, programme_name="PhD", degree_level_id=3, minimum_duration_years=0)
        assert errors == ["Minimum duration must be at least 1 year"]

    def test_max_below_min(self):
        errors = messages(
            ProgrammeCreate,
            programme_name="M.Tech",
            degree_level_id=2,
            minimum_duration_years=2,
            maximum_duration_years=1,
        )
        assert errors == ["Maximum duration cannot be less than minimum duration"]

    def test_name_required(self):
        errors = messages(ProgrammeCreate, programme_name="", degree_level_id=2, minimum_duration_years=2)
        assert errors == ["Programme name is required"]

    def test_update_partial(self):
        form = ProgrammeUpdate(programme_name="MCA", is_active=False)
        assert form.model_dump(exclude_none=True) == {"programme_name": "MCA", "is_active": False}

    def test_update_max_below_min(self):
        errors = messages(ProgrammeUpdate, programme_name="MCA", minimum_duration_years=3, maximum_duration_years=2)
        assert errors == ["Maximum duration cannot be less than minimum duration"]


class TestBatchForms:
    def test_semester_enum(self):
        form = BatchCreate(programme_id=1, batch_name="CSE 2025", start_year=2025, start_semester="AUTUMN")
        assert form.start_semester is Semester.AUTUMN
        assert form.model_dump(mode="json")["start_semester"] == "AUTUMN"

    def test_unknown_semester(self):
        with pytest.raises(ValidationError):
            BatchCreate(programme_id=1, batch_name="CSE 2025", start_year=2025, start_semester="SUMMER")

    def test_name_required(self):
        assert messages(BatchUpdate, batch_name="   ") == ["Batch name is required"]


class TestFacultyForms:
    def test_create_lowercases_email(self):
        assert FacultyCreate(email=" Ravi.Kumar@TEZU.ac.in ").email == "ravi.kumar@tezu.ac.in"

    def test_create_email_required(self):
        assert messages(FacultyCreate, email="") == ["Email is required"]

    def test_update_blanks_become_none(self):
        form = FacultyUpdate(full_name="Ravi Kumar", email="", phone_number=" ", specialization="")
        assert form.email is None
        assert form.phone_number is None
        assert form.specialization is None

    def test_update_name_required(self):
        assert messages(FacultyUpdate, full_name="") == ["Full name is required"]

    def test_delete_response(self):
        response = DeleteFacultyResponse.model_validate(
            {"message": "Deleted", "deleted_faculty": {"full_name": "Ravi Kumar", "email": "r@tezu.ac.in"}}
        )
        assert response.deleted_faculty.full_name == "Ravi Kumar"


class TestProfileForms:
    def test_student_profile_blanks(self):
        form = StudentProfileForm(self_phone_number="", date_of_birth=date(2004, 5, 17))
        assert form.roll_number is None
        assert form.self_phone_number is None

    def test_roll_number_stripped(self):
        assert StudentProfileForm(roll_number=" CSB21001 ").roll_number == "CSB21001"

    def test_blank_roll_number_rejected(self):
        """Test a roll number may be left out but not submitted empty"""
        assert messages(StudentProfileForm, roll_number="   ") == ["Roll number is required"]

    def test_student_short_phone(self):
        assert messages(StudentProfileForm, self_phone_number="12345") == ["Invalid phone number"]

    def test_student_short_guardian_phone(self):
        assert messages(StudentProfileForm, guardian_phone_number="12345") == ["Invalid guardian phone number"]

    def test_faculty_short_specialization(self):
        errors = messages(FacultyProfileForm, specialization="A")
        assert errors == ["Specialization must be at least 2 characters"]

    def test_address_required_fields(self):
        errors = messages(AddressForm, address_line_1="", city="", state="Assam", postal_code="784028", country="India")
        assert errors == ["Address line 1 is required", "City is required"]

    def test_address_line_2_blank(self):
        form = AddressForm(
            address_line_1="Napaam", address_line_2=" ", city="Tezpur", state="Assam", postal_code="784028",
            country="India",
        )
        assert form.address_line_2 is None

    def test_address_one_line(self):
        address = Address(
            address_id=1, user_id=7, address_line_1="Napaam", city="Tezpur", state="Assam", postal_code="784028",
            country="India",
        )
        assert address.one_line() == "Napaam, Tezpur, Assam, 784028, India"


class TestAccountForms:
    def test_profile_update_name(self):
        errors = messages(ProfileUpdateForm, full_name="A", email="a@tezu.ac.in")
        assert errors == ["Full name must be at least 2 characters"]

    def test_profile_update_email(self):
        assert messages(ProfileUpdateForm, full_name="Anita", email="nope") == ["Invalid email address"]

    def test_password_too_short(self):
        errors = messages(PasswordChangeForm, current_password="old", new_password="short", confirm_password="short")
        assert errors == ["Password must be at least 8 characters"]

    def test_passwords_must_match(self):
        errors = messages(
            PasswordChangeForm, current_password="old", new_password="longenough1", confirm_password="longenough2"
        )
        assert errors == ["Passwords don't match"]

    def test_current_required(self):
        errors = messages(PasswordChangeForm, current_password="", new_password="longenough", confirm_password="longenough")
        assert errors == ["Current password is required"]
