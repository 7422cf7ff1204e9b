from storefront.profile.types import UserProfile

RULE = "-" * 27


def render_profile(profile: UserProfile) -> str:
    lines: list[str] = ["", RULE, "       USER PROFILE", RULE]

    lines.append(f"Name: {profile.name}")
    lines.append(f"Surname: {profile.surname}")
    lines.append(f"Age: {profile.age}")

    lines.append(RULE)
    if profile.has_pets:
        lines.append("Pets:")
        lines.extend(f" - {pet}" for pet in profile.pets)
    else:
        lines.append("No pets.")

    lines.append(RULE)
    lines.append("Favorite colors:")
    lines.extend(f" - {color}" for color in profile.colors)

    return "\n".join(lines) + "\n"
