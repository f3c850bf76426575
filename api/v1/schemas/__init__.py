"""Re-export individual schema modules for easy imports."""

from .user import Profile, ProfileUpdate, ProfileUpdateOut, UserOut
from .auth import Credentials, ForgotPasswordIn, MessageOut, ResetPasswordIn, TokenOut
from .activity import ActivityCreate, ActivityCreated, ActivityList, ActivityOut
from .stats import StatsOut

__all__ = [
    "Profile",
    "ProfileUpdate",
    "ProfileUpdateOut",
    "UserOut",
    "Credentials",
    "ForgotPasswordIn",
    "MessageOut",
    "ResetPasswordIn",
    "TokenOut",
    "ActivityCreate",
    "ActivityCreated",
    "ActivityList",
    "ActivityOut",
    "StatsOut",
]
