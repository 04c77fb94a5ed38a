"""Sign-in, account creation and enrollment flow.

There is no account backend: submitting a form only checks that the fields a
user must fill are present and moves the session to its next stage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

from pulsewatch.utilities.logging import get_logger

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 8
EPOCH_DATE = date(1970, 1, 1)


class OnboardingError(ValueError):
    """Raised when a form is submitted before it is complete."""


class Stage(StrEnum):
    LOGIN = "login"
    CREATE_ACCOUNT = "create_account"
    ENROLLMENT = "enrollment"
    DASHBOARD = "dashboard"


@dataclass
class Profile:
    full_name: str = ""
    email: str = ""
    date_of_birth: date = EPOCH_DATE
    consent_accepted: bool = False


def login_ready(email: str, password: str) -> bool:
    return bool(email) and bool(password)


def passwords_match(password: str, confirmation: str) -> bool:
    return bool(password) and password == confirmation


def create_account_ready(
    full_name: str, email: str, password: str, confirmation: str
) -> bool:
    return (
        bool(full_name)
        and bool(email)
        and passwords_match(password, confirmation)
        and len(password) >= MIN_PASSWORD_LENGTH
    )


def enrollment_ready(profile: Profile) -> bool:
    return profile.consent_accepted and bool(profile.full_name) and bool(profile.email)


@dataclass
class OnboardingFlow:
    profile: Profile = field(default_factory=Profile)
    logged_in: bool = False
    enrollment_complete: bool = False
    creating_account: bool = False

    @property
    def stage(self) -> Stage:
        if not self.logged_in:
            return Stage.CREATE_ACCOUNT if self.creating_account else Stage.LOGIN
        if not self.enrollment_complete:
            return Stage.ENROLLMENT
        return Stage.DASHBOARD

    def log_in(self, email: str, password: str) -> Stage:
        if not login_ready(email, password):
            raise OnboardingError("Email and password are required to log in")
        # Returning users skip enrollment.
        self.logged_in = True
        self.enrollment_complete = True
        logger.info("Signed in")
        return self.stage

    def begin_account_creation(self) -> Stage:
        self.creating_account = True
        return self.stage

    def cancel_account_creation(self) -> Stage:
        self.creating_account = False
        return self.stage

    def create_account(
        self, full_name: str, email: str, password: str, confirmation: str
    ) -> Stage:
        if not create_account_ready(full_name, email, password, confirmation):
            raise OnboardingError(
                "Name, email and matching passwords of at least "
                f"{MIN_PASSWORD_LENGTH} characters are required"
            )
        self.profile = Profile(full_name=full_name, email=email)
        self.enrollment_complete = False
        self.logged_in = True
        self.creating_account = False
        logger.info("Account created; enrollment pending")
        return self.stage

    def enroll(self, profile: Profile) -> Stage:
        if not self.logged_in:
            raise OnboardingError("Log in before enrolling")
        if not enrollment_ready(profile):
            raise OnboardingError("Name, email and consent are required to enroll")
        self.profile = profile
        self.enrollment_complete = True
        logger.info("Enrollment complete")
        return self.stage

    def sign_out(self) -> Stage:
        self.logged_in = False
        self.enrollment_complete = False
        self.creating_account = False
        self.profile = Profile()
        logger.info("Signed out")
        return self.stage
