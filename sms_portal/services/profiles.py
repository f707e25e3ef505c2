"""
Profile management for students and faculty, plus student address book.

Profiles are upserted: the service looks up the existing profile and PUTs
to it, or POSTs a new one carrying the user_id when none exists yet.
"""
import logging

from sms_portal.api import ApiError
from sms_portal.schemas.profile import (
    Address,
    AddressForm,
    AddressType,
    FacultyProfile,
    FacultyProfileForm,
    StudentProfile,
    StudentProfileForm,
)
from sms_portal.services.base import ResourceService

logger = logging.getLogger(__name__)


class ProfileService(ResourceService):
    # ---- student profiles --------------------------------------------------

    def get_student_profile(self, user_id: int = None) -> StudentProfile:
        endpoint = f"/student-profiles/{user_id}" if user_id else "/student-profiles/me"
        data = self.client.get(endpoint, default_error="Failed to fetch student profile")
        return self._one(StudentProfile, data)

    def upsert_student_profile(self, user_id: int, form: StudentProfileForm):
        return self._upsert("/student-profiles", user_id, self._body(form), self.get_student_profile,
                            "Failed to update student profile")

    # ---- faculty profiles --------------------------------------------------

    def get_faculty_profile(self, user_id: int = None) -> FacultyProfile:
        endpoint = f"/faculty-profiles/{user_id}" if user_id else "/faculty-profiles/me"
        data = self.client.get(endpoint, default_error="Failed to fetch faculty profile")
        return self._one(FacultyProfile, data)

    def upsert_faculty_profile(self, user_id: int, form: FacultyProfileForm):
        return self._upsert("/faculty-profiles", user_id, self._body(form), self.get_faculty_profile,
                            "Failed to update faculty profile")

    def _upsert(self, collection, user_id, body, lookup, default_error):
        try:
            lookup(user_id)
            exists = True
        except ApiError as exc:
            # any failure to read means there is nothing to update yet
            logger.info(f"[PROFILE] no existing profile at {collection}/{user_id} ({exc}); creating")
            exists = False

        if exists:
            return self.client.put(f"{collection}/{user_id}", json=body, default_error=default_error)
        return self.client.post(collection, json={"user_id": user_id, **body}, default_error=default_error)

    # ---- addresses ---------------------------------------------------------

    def list_addresses(self, user_id: int = None):
        params = {"user_id": user_id} if user_id else None
        data = self.client.get("/addresses", params=params, default_error="Failed to fetch addresses")
        return self._many(Address, data)

    def create_address(self, user_id: int, form: AddressForm):
        body = {"user_id": user_id, **self._body(form)}
        data = self.client.post("/addresses", json=body, default_error="Failed to create address")
        logger.info(f"[ADDRESS] created for user {user_id}")
        return data

    def update_address(self, address_id: int, form: AddressForm):
        return self.client.put(
            f"/addresses/{address_id}",
            json=self._body(form, exclude_none=False),
            default_error="Failed to update address",
        )

    def assign_address(self, address_id: int, address_type):
        if not isinstance(address_type, AddressType):
            try:
                address_type = AddressType(str(address_type).lower())
            except ValueError:
                raise ValueError(f"Unknown address type: {address_type!r}") from None

        return self.client.put(
            f"/addresses/{address_id}/assign",
            json={"type": address_type.value},
            default_error=f"Failed to assign {address_type.value} address",
        )

    def delete_address(self, address_id: int):
        data = self.client.delete(f"/addresses/{address_id}", default_error="Failed to delete address")
        logger.info(f"[ADDRESS] deleted {address_id}")
        return data
