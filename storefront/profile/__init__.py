from storefront.profile.prompter import ProfileInputAborted, ProfilePrompter
from storefront.profile.render import render_profile
from storefront.profile.types import UserProfile

__all__ = [
    "UserProfile",
    "ProfilePrompter",
    "ProfileInputAborted",
    "render_profile",
]
