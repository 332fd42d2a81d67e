tank_tag_description = "Fuel tanks of the station."

create_tank_description = (
    """
    **Adding a tank.**<br>
    <br>
    The title must be unique within the station regardless of case. A new tank is empty.<br>
    <br>
    Returns the whole tank collection of the station.
    """
)

get_tanks_description = "Tanks of the station and the total quantity of fuel they hold."

edit_tank_description = (
    """
    **Editing a tank.**<br>
    <br>
    **current_quantity** is the amount to add to the tank (negative to withdraw), not the new value.
    The resulting quantity must stay between zero and the tank limit, otherwise the request is
    rejected and nothing is changed.
    """
)

delete_tank_description = (
    """
    **Deleting a tank.**<br>
    <br>
    The pumps of the tank and their daily sales are deleted as well. Deliveries to the tank
    are kept and listed with an unknown tank.
    """
)
