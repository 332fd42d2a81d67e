from password_strength import PasswordPolicy

from fillstation.utils import enums


def check_password_strength(role_name: str | None, password: str) -> str | None:
    """
    Returns the description of the violated requirements or None if the password is strong enough.
    """
    if role_name == enums.Role.ATTENDANT.name:
        policy = PasswordPolicy.from_names(
            length=6,
            numbers=1,
        )
        strength = 'at least 6 characters including a number.'

    else:
        policy = PasswordPolicy.from_names(
            length=8,
            uppercase=1,
            numbers=1,
            special=1
        )
        strength = 'at least 8 characters including an uppercase letter, a number and a special character.'

    if policy.test(password):
        return 'Password does not meet the complexity requirements: ' + strength

    return None
