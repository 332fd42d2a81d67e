station_tag_description = "Filling station registration and profile."

register_station_description = (
    """
    **Station registration.**<br>
    <br>
    Creates the filling station together with the account of its manager. The manager
    can log in right away with the given email and password.<br>
    <br>
    The license number and the manager email must be unique. The password must contain
    at least 8 characters including an uppercase letter, a number and a special character.
    """
)

get_station_description = "Profile of the station the manager is attached to."

edit_station_description = (
    """
    Editing of the station profile. Only the fields present in the request are changed.
    """
)

delete_station_description = (
    """
    **Deleting the station.**<br>
    <br>
    Removes the station together with its staff accounts, tanks, pumps, daily sales and deliveries.
    """
)
