import logging
from typing import List

from sms_portal.schemas.account import (
    MIN_PASSWORD_LENGTH,
    PasswordChangeForm,
    ProfileUpdateForm,
    UpdateProfileRequest,
)
from sms_portal.schemas.auth import UserProfile
from sms_portal.services.base import ResourceService

logger = logging.getLogger(__name__)


class AccountService(ResourceService):
    """The logged-in user's own account: /auth/me."""

    def get_me(self) -> UserProfile:
        self.client.require_token()
        data = self.client.get("/auth/me", default_error="Failed to fetch user profile")
        return self._one(UserProfile, data)

    def update_me(self, request: UpdateProfileRequest):
        self.client.require_token()
        return self.client.put("/auth/me", json=self._body(request), default_error="Failed to update user profile")

    def update_profile(self, form: ProfileUpdateForm):
        return self.update_me(UpdateProfileRequest(full_name=form.full_name, email=form.email))

    def change_password(self, form: PasswordChangeForm):
        result = self.update_me(
            UpdateProfileRequest(current_password=form.current_password, new_password=form.new_password)
        )
        logger.info("[ACCOUNT] password changed")
        return result

    @staticmethod
    def validate_password(password: str) -> List[str]:
        errors = []
        if len(password or "") < MIN_PASSWORD_LENGTH:
            errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
        return errors

    @staticmethod
    def validate_password_change(current_password: str, new_password: str, confirm_password: str) -> List[str]:
        errors = []
        if not current_password:
            errors.append("Current password is required")
        if not new_password:
            errors.append("New password is required")
        if new_password != confirm_password:
            errors.append("New passwords do not match")
        errors.extend(AccountService.validate_password(new_password))
        return errors
