from typing import Annotated, Any

from pydantic import BeforeValidator, StringConstraints

from fillstation.utils import enums


def empty_str_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip() == '':
        return None
    return value


def fuel_type_by_name(value: Any) -> Any:
    # Fuel types are matched regardless of case and surrounding spaces
    if isinstance(value, str):
        return enums.FuelType(value)
    return value


def role_by_name(value: Any) -> Any:
    if isinstance(value, enums.Role):
        return value.name

    if isinstance(value, str):
        name = value.strip().upper()
        if name not in enums.Role.__members__:
            raise ValueError(f"Unknown role: {value}")
        return name

    return value


EmptyStrToNone = Annotated[str | None, BeforeValidator(empty_str_to_none)]

FuelTypeByName = Annotated[enums.FuelType, BeforeValidator(fuel_type_by_name)]

RoleByName = Annotated[str, BeforeValidator(role_by_name)]

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
