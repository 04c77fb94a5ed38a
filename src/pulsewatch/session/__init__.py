from pulsewatch.session.controller import SampleSources, SessionController
from pulsewatch.session.onboarding import (OnboardingError, OnboardingFlow,
                                           Profile, Stage)
from pulsewatch.session.state import SessionState

__all__ = [
    "OnboardingError",
    "OnboardingFlow",
    "Profile",
    "SampleSources",
    "SessionController",
    "SessionState",
    "Stage",
]
